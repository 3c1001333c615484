"""Tests for the end-to-end transformation."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from gfm2mdx.config import GFM2MDX_DEFAULT_TITLE
from gfm2mdx.exceptions import ParseError
from gfm2mdx.transform import transform_markdown_to_mdx


class TestTransformMarkdownToMdx:
    """Tests for transform_markdown_to_mdx."""

    @pytest.mark.asyncio
    async def test_title_and_tip_callout(self) -> None:
        """Title moves to front matter and the tip becomes a callout."""
        result = await transform_markdown_to_mdx("# Hi\n\n> [!TIP]\nDo the thing.\n", "d")

        assert result.startswith('---\ntitle: "Hi"\ndescription: "d"\npagefind: true\n---\n\n')
        body = result.split("---\n\n", 1)[1]
        assert body == ":::tip\nDo the thing.\n:::\n"
        assert "# Hi" not in body

    @pytest.mark.asyncio
    async def test_default_title_and_pagefind_false(self) -> None:
        """Documents without a title get the placeholder."""
        result = await transform_markdown_to_mdx("Just text.\n", "desc", pagefind=False)

        assert f'title: "{GFM2MDX_DEFAULT_TITLE}"' in result
        assert "pagefind: false" in result
        assert result.endswith("Just text.\n")

    @pytest.mark.asyncio
    async def test_pagefind_none_uses_configured_default(self) -> None:
        """None falls back to the configured pagefind default."""
        with patch("gfm2mdx.transform.GFM2MDX_DEFAULT_PAGEFIND", False):
            result = await transform_markdown_to_mdx("# T\n", "d", pagefind=None)

        assert "pagefind: false" in result

    @pytest.mark.asyncio
    async def test_document_with_mixed_content(self, alert_document: str) -> None:
        """Alerts are rewritten, plain quotes and prose are kept."""
        result = await transform_markdown_to_mdx(alert_document, "Setup guide")

        assert 'title: "Getting Started"' in result
        assert "Intro paragraph." in result
        assert ":::note\nRun `make install` first.\n:::" in result
        assert "> Just a quote." in result

    @pytest.mark.asyncio
    async def test_warning_becomes_caution(self) -> None:
        """WARNING alerts render as caution callouts."""
        result = await transform_markdown_to_mdx("> [!WARNING]\n> Hot.\n", "d")

        assert ":::caution\nHot.\n:::" in result
        assert ":::warning" not in result

    @pytest.mark.asyncio
    async def test_unsupported_alert_untouched(self) -> None:
        """Unknown keywords leave the blockquote as a quote."""
        result = await transform_markdown_to_mdx("> [!BOGUS]\n> Nothing special.\n", "d")

        assert "> [!BOGUS]" in result
        assert ":::" not in result

    @pytest.mark.asyncio
    async def test_angle_brackets_and_tool_comments(self) -> None:
        """Prose brackets are escaped, fences kept, tool comments dropped."""
        source = (
            "<!-- vale off -->\n"
            "# API\n"
            "\n"
            "Pass <name> to {render}.\n"
            "\n"
            "```python\n"
            "if a < b:\n"
            "    pass\n"
            "```\n"
        )

        result = await transform_markdown_to_mdx(source, "d")

        assert "vale" not in result
        assert 'title: "API"' in result
        assert "Pass &lt;name&gt; to \\{render\\}." in result
        assert "if a < b:" in result

    @pytest.mark.asyncio
    async def test_parse_failure_propagates(self) -> None:
        """Parser errors surface to the caller."""
        with patch(
            "gfm2mdx.transform.parse_markdown",
            side_effect=ParseError("boom"),
        ):
            with pytest.raises(ParseError, match="boom"):
                await transform_markdown_to_mdx("# T\n", "d")

    @pytest.mark.asyncio
    async def test_title_with_angle_brackets(self) -> None:
        """The title carries the literal brackets, not their entities."""
        result = await transform_markdown_to_mdx("# Use <T> now\n\nBody.\n", "d")

        assert 'title: "Use <T> now"' in result
