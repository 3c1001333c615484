"""Document title extraction."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass

from gfm2mdx.config import GFM2MDX_DEFAULT_TITLE
from gfm2mdx.tree import HEADING, MarkdownTree, Node, flatten_text

logger = logging.getLogger(__name__)


@dataclass
class ExtractedTitle:
    """Title text and the top-level nodes left once the title is removed."""

    title: str
    content: list[Node]


def extract_title(tree: MarkdownTree, *, default: str | None = None) -> ExtractedTitle:
    """Pull the first top-level ``# heading`` out of the tree.

    Character references in the heading text are decoded. Headings nested
    in blockquotes or lists are ignored. When no level-1 heading exists the
    title falls back to ``default`` (or ``GFM2MDX_DEFAULT_TITLE``) and no
    node is removed.
    """
    for index, node in enumerate(tree.children):
        if node["type"] == HEADING and node["attrs"]["level"] == 1:
            title = html.unescape(flatten_text(node))
            logger.debug("Found title %r at top-level node %d", title, index)
            return ExtractedTitle(
                title=title,
                content=tree.children[:index] + tree.children[index + 1 :],
            )

    title = default if default is not None else GFM2MDX_DEFAULT_TITLE
    logger.debug("No level-1 heading found, using %r", title)
    return ExtractedTitle(title=title, content=list(tree.children))
