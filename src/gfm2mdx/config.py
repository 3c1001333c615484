"""Local configuration for gfm2mdx."""

from __future__ import annotations

import os


DEFAULT_TITLE = "Default Title"
DEFAULT_DIAGRAM_LANGUAGES = "mermaid"
DEFAULT_PAGEFIND = "true"

# Title used when a document has no top-level "# heading".
GFM2MDX_DEFAULT_TITLE = os.getenv("GFM2MDX_DEFAULT_TITLE", DEFAULT_TITLE)
# Fenced code info strings whose blocks are treated as diagrams.
GFM2MDX_DIAGRAM_LANGUAGES = tuple(
    lang.strip()
    for lang in os.getenv("GFM2MDX_DIAGRAM_LANGUAGES", DEFAULT_DIAGRAM_LANGUAGES).split(",")
    if lang.strip()
)
GFM2MDX_DEFAULT_PAGEFIND = os.getenv("GFM2MDX_DEFAULT_PAGEFIND", DEFAULT_PAGEFIND).strip().lower() in {
    "1",
    "true",
    "yes",
    "on",
}
