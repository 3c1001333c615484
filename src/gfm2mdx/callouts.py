"""Rewrite GitHub alert blockquotes into MDX callout blocks."""

from __future__ import annotations

import logging

from gfm2mdx.admonitions import AdmonitionKind, admonition_kind_for, match_admonition_marker
from gfm2mdx.tree import (
    BLOCK_CODE,
    BLOCK_QUOTE,
    CODESPAN,
    PARAGRAPH,
    RAW,
    SOFTBREAK,
    TEXT,
    Node,
    flatten_text,
)

logger = logging.getLogger(__name__)


def transform_github_markdown(nodes: list[Node]) -> list[Node]:
    """Replace alert blockquotes among ``nodes`` with callout blocks.

    Only top-level blockquotes are inspected. Blockquotes without a supported
    ``[!KEYWORD]`` marker, and every other node, are returned unchanged and in
    their original order.
    """
    result: list[Node] = []
    rewritten = 0
    for node in nodes:
        if node["type"] == BLOCK_QUOTE:
            callout = transform_blockquote(node)
            if callout is not None:
                result.append(callout)
                rewritten += 1
                continue
        result.append(node)
    logger.debug("Rewrote %d blockquote(s) into callouts", rewritten)
    return result


def transform_blockquote(blockquote: Node) -> Node | None:
    """Build a callout node for an alert blockquote, or None if it is not one."""
    children = blockquote["children"]
    if not children or children[0]["type"] != PARAGRAPH:
        return None
    first_paragraph = children[0]

    keyword = match_admonition_marker(flatten_text(first_paragraph).strip())
    if keyword is None:
        return None
    kind = admonition_kind_for(keyword)
    if kind is None:
        return None

    body = _clean_marker(_blockquote_content(blockquote), kind, keyword)
    return {"type": RAW, "raw": f":::{kind.value}\n{body}\n:::"}


def _blockquote_content(blockquote: Node) -> str:
    return "\n".join(_render_block(child) for child in blockquote["children"])


def _render_block(block: Node) -> str:
    if block["type"] == PARAGRAPH:
        return "".join(_render_inline(child) for child in block["children"])
    if block["type"] == BLOCK_CODE:
        code = block["raw"].rstrip("\n")
        return f"`{code}`"
    return ""


def _render_inline(node: Node) -> str:
    if node["type"] == TEXT:
        return node["raw"]
    if node["type"] == CODESPAN:
        return f"`{node['raw']}`"
    if node["type"] == SOFTBREAK:
        return "\n"
    return ""


def _clean_marker(content: str, kind: AdmonitionKind, keyword: str) -> str:
    # Both forms are removed; they differ for aliases such as WARNING -> CAUTION.
    return (
        content.replace(f"[!{kind.value.upper()}]", "", 1)
        .replace(f"[!{keyword.upper()}]", "", 1)
        .strip()
    )
