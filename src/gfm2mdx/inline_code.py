"""Undo backslash escaping left in text nodes."""

from __future__ import annotations

from gfm2mdx.tree import TEXT, Node, iter_nodes


def preserve_inline_code(nodes: list[Node]) -> list[Node]:
    """Strip every backslash from text nodes, in place, at any depth.

    Only ``text`` nodes change; code spans, code blocks and raw markup keep
    their values. Returns ``nodes`` for chaining.
    """
    for node in iter_nodes(nodes):
        if node["type"] == TEXT:
            node["raw"] = node["raw"].replace("\\", "")
    return nodes
