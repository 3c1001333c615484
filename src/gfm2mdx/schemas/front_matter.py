"""Front matter model."""

from __future__ import annotations

from pydantic import BaseModel


class FrontMatter(BaseModel):
    """Metadata header placed above an MDX page body."""

    title: str
    description: str
    pagefind: bool = True

    def render(self) -> str:
        """Render the header, followed by one blank line."""
        lines = [
            "---",
            f'title: "{_quote(self.title)}"',
            f'description: "{_quote(self.description)}"',
            f"pagefind: {'true' if self.pagefind else 'false'}",
            "---",
        ]
        return "\n".join(lines) + "\n\n"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
