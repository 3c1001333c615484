"""Transformation pipeline for GitHub Markdown -> MDX."""

from __future__ import annotations

import asyncio
import logging

from gfm2mdx.callouts import transform_github_markdown
from gfm2mdx.config import GFM2MDX_DEFAULT_PAGEFIND
from gfm2mdx.front_matter import generate_front_matter
from gfm2mdx.inline_code import preserve_inline_code
from gfm2mdx.preprocess import pre_process_markdown
from gfm2mdx.printer import render_markdown, render_mdx
from gfm2mdx.title import extract_title
from gfm2mdx.tree import parse_markdown

logger = logging.getLogger(__name__)


async def transform_markdown_to_mdx(
    markdown: str,
    description: str,
    pagefind: bool | None = True,
    *,
    preserve_html_lines: bool = False,
) -> str:
    """Convert a GitHub Markdown document into an MDX page.

    The first ``# heading`` becomes the front matter title, GitHub alert
    blockquotes become ``:::kind`` callouts and the body is escaped for MDX.

    Args:
        markdown: Source document text.
        description: Value for the ``description`` front matter field.
        pagefind: Value for the ``pagefind`` field. ``None`` uses
            ``GFM2MDX_DEFAULT_PAGEFIND``.
        preserve_html_lines: Keep lines that look like HTML tags unescaped.

    Returns:
        Front matter followed by the MDX body.

    Raises:
        ParseError: If the parser fails on the document.
        ConversionError: If the tree cannot be printed.
    """
    if pagefind is None:
        pagefind = GFM2MDX_DEFAULT_PAGEFIND

    preprocessed = pre_process_markdown(markdown, preserve_html_lines=preserve_html_lines)
    tree = parse_markdown(preprocessed)
    extracted = extract_title(tree)

    content = transform_github_markdown(extracted.content)
    content = preserve_inline_code(content)
    intermediate = render_markdown(content, tree.state)

    body = await asyncio.to_thread(render_mdx, intermediate)
    logger.debug("Converted %r (%d chars of MDX)", extracted.title, len(body))

    front_matter = generate_front_matter(extracted.title, description, pagefind)
    return front_matter + body.lstrip("\n")
