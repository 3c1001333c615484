"""Line-oriented clean-up of GitHub Markdown before parsing."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from gfm2mdx.admonitions import is_marker_line
from gfm2mdx.config import GFM2MDX_DIAGRAM_LANGUAGES

logger = logging.getLogger(__name__)

_FENCE = "```"
_TOOL_COMMENT_RES = (
    re.compile(r"<!--\s*vale\s+(on|off)\s*-->"),
    re.compile(r"<!--\s*generated by git-cliff\s*-->"),
)
_HTML_TAG_LINE_RE = re.compile(r"^[<\s][^>]*>")

_DIAGRAM = "diagram"
_CODE = "code"


def strip_tool_comments(markdown: str) -> str:
    """Remove Vale toggles and git-cliff attribution comments."""
    for pattern in _TOOL_COMMENT_RES:
        markdown = pattern.sub("", markdown)
    return markdown


def escape_angle_brackets(line: str) -> str:
    return line.replace("<", "&lt;").replace(">", "&gt;")


def pre_process_markdown(
    markdown: str,
    *,
    preserve_html_lines: bool = False,
    diagram_languages: Iterable[str] | None = None,
) -> str:
    """Make GitHub Markdown safe to parse as MDX source.

    Tool comments are stripped, then every line outside fenced code and
    diagram blocks has ``<`` and ``>`` replaced with HTML entities.
    Blockquote lines and bare ``[!KEYWORD]`` alert lines are kept verbatim.

    Args:
        markdown: Raw document text.
        preserve_html_lines: If True, lines that look like an HTML tag are
            also kept verbatim.
        diagram_languages: Fence info strings that open a diagram block.
            Defaults to ``GFM2MDX_DIAGRAM_LANGUAGES``.

    Returns:
        The processed text, with the same number of lines.
    """
    openers = tuple(
        _FENCE + lang for lang in (diagram_languages or GFM2MDX_DIAGRAM_LANGUAGES)
    )
    fence: str | None = None
    processed: list[str] = []

    for line in strip_tool_comments(markdown).split("\n"):
        stripped = line.strip()

        if fence is None and stripped.startswith(openers):
            fence = _DIAGRAM
        elif fence == _DIAGRAM:
            # Only a bare fence closes a diagram.
            if stripped == _FENCE:
                fence = None
        elif stripped.startswith(_FENCE):
            fence = None if fence == _CODE else _CODE
        elif fence == _CODE:
            pass
        elif stripped.startswith(">") or is_marker_line(line):
            pass
        elif preserve_html_lines and _HTML_TAG_LINE_RE.match(line):
            pass
        else:
            line = escape_angle_brackets(line)

        processed.append(line)

    if fence is not None:
        logger.debug("Input ended inside an unclosed %s fence", fence)

    return "\n".join(processed)
