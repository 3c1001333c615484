"""gfm2mdx: convert GitHub Markdown documentation into MDX pages."""

from gfm2mdx.admonitions import AdmonitionKind, admonition_kind_for
from gfm2mdx.callouts import transform_github_markdown
from gfm2mdx.exceptions import ConversionError, Gfm2mdxError, ParseError
from gfm2mdx.front_matter import generate_front_matter
from gfm2mdx.inline_code import preserve_inline_code
from gfm2mdx.preprocess import pre_process_markdown
from gfm2mdx.schemas import FrontMatter
from gfm2mdx.title import ExtractedTitle, extract_title
from gfm2mdx.transform import transform_markdown_to_mdx
from gfm2mdx.tree import MarkdownTree, parse_markdown

__all__ = [
    "AdmonitionKind",
    "ConversionError",
    "ExtractedTitle",
    "FrontMatter",
    "Gfm2mdxError",
    "MarkdownTree",
    "ParseError",
    "admonition_kind_for",
    "extract_title",
    "generate_front_matter",
    "parse_markdown",
    "pre_process_markdown",
    "preserve_inline_code",
    "transform_github_markdown",
    "transform_markdown_to_mdx",
]
