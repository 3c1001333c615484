"""Front matter generation for MDX pages."""

from __future__ import annotations

from gfm2mdx.schemas import FrontMatter


def generate_front_matter(title: str, description: str, pagefind: bool) -> str:
    """Render the title/description/pagefind header block."""
    return FrontMatter(title=title, description=description, pagefind=pagefind).render()
