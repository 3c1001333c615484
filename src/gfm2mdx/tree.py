"""Parse Markdown into a mistune token tree and walk it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

import mistune
from mistune.core import BlockState

from gfm2mdx.exceptions import ParseError

Node = dict[str, Any]

# Node kind tags produced by mistune's AST renderer.
HEADING = "heading"
PARAGRAPH = "paragraph"
BLOCK_QUOTE = "block_quote"
BLOCK_CODE = "block_code"
RAW = "block_html"
TEXT = "text"
CODESPAN = "codespan"
SOFTBREAK = "softbreak"
BLANK_LINE = "blank_line"


@dataclass
class MarkdownTree:
    """Top-level nodes of a parsed document plus the parser state.

    The state carries link reference definitions, which the printer emits
    after the body.
    """

    children: list[Node]
    state: BlockState


def parse_markdown(markdown: str) -> MarkdownTree:
    """Parse Markdown text into a tree of typed nodes.

    Raises:
        ParseError: If mistune fails on the input.
    """
    parser = mistune.create_markdown(renderer=None)
    try:
        tokens, state = parser.parse(markdown)
    except Exception as exc:
        raise ParseError(f"Failed to parse Markdown: {exc}") from exc
    return MarkdownTree(children=_drop_blank_lines(tokens), state=state)


def _drop_blank_lines(nodes: list[Node]) -> list[Node]:
    kept: list[Node] = []
    for node in nodes:
        if node["type"] == BLANK_LINE:
            continue
        if "children" in node:
            node["children"] = _drop_blank_lines(node["children"])
        kept.append(node)
    return kept


def iter_nodes(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node in ``nodes`` and all of their descendants, depth-first."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.get("children") or []))


def flatten_text(node: Node) -> str:
    """Concatenate the literal values of a node's direct text children."""
    parts: list[str] = []
    for child in node.get("children") or []:
        if child["type"] == TEXT:
            parts.append(child["raw"])
        elif child["type"] == SOFTBREAK:
            parts.append("\n")
    return "".join(parts)
