"""GitHub alert keywords and the callout kinds they map to."""

from __future__ import annotations

import re
from enum import Enum


class AdmonitionKind(str, Enum):
    """Callout kinds understood by the target dialect."""

    CAUTION = "caution"
    NOTE = "note"
    TIP = "tip"


# Alert keywords GitHub recognizes in "> [!KEYWORD]" blockquotes.
SOURCE_KEYWORDS = ("TIP", "NOTE", "WARNING", "IMPORTANT", "CAUTION")

_KEYWORD_ALIASES = {"WARNING": AdmonitionKind.CAUTION}

_MARKER_RE = re.compile(r"^\[\!(\w+)\]")
_MARKER_LINE_RE = re.compile(r"^\[!(" + "|".join(SOURCE_KEYWORDS) + r")\]")


def admonition_kind_for(keyword: str) -> AdmonitionKind | None:
    """Return the callout kind for an alert keyword, or None if unsupported.

    Matching is case-insensitive. ``WARNING`` maps to ``caution``; every other
    keyword maps to the kind with the same lowercased name.
    """
    upper = keyword.upper()
    if upper in _KEYWORD_ALIASES:
        return _KEYWORD_ALIASES[upper]
    try:
        return AdmonitionKind(keyword.lower())
    except ValueError:
        return None


def match_admonition_marker(text: str) -> str | None:
    """Return the keyword of a leading ``[!KEYWORD]`` marker in ``text``."""
    match = _MARKER_RE.match(text)
    if match:
        return match.group(1)
    return None


def is_marker_line(line: str) -> bool:
    """Check if a raw line starts with an uppercase GitHub alert marker."""
    return bool(_MARKER_LINE_RE.match(line))
