"""Print token trees as Markdown or MDX."""

from __future__ import annotations

from typing import Any

from mistune.core import BlockState
from mistune.renderers.markdown import MarkdownRenderer

from gfm2mdx.exceptions import ConversionError
from gfm2mdx.tree import Node, parse_markdown

# Characters MDX reads as expression or JSX delimiters in plain text.
_MDX_ESCAPES = str.maketrans({"{": "\\{", "}": "\\}", "<": "&lt;"})


class MdxRenderer(MarkdownRenderer):
    """Markdown renderer that escapes text for an MDX parser."""

    NAME = "mdx"

    def text(self, token: dict[str, Any], state: BlockState) -> str:
        return super().text(token, state).translate(_MDX_ESCAPES)


def render_markdown(
    nodes: list[Node], state: BlockState, renderer: MarkdownRenderer | None = None
) -> str:
    """Serialize nodes back to Markdown text.

    Raises:
        ConversionError: If a node kind has no printer.
    """
    renderer = renderer or MarkdownRenderer()
    try:
        return renderer(nodes, state)
    except AttributeError as exc:
        raise ConversionError(f"Cannot print node: {exc}") from exc


def render_mdx(markdown: str) -> str:
    """Reparse Markdown text and print it with MDX escaping rules."""
    tree = parse_markdown(markdown)
    return render_markdown(tree.children, tree.state, MdxRenderer())
