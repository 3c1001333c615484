"""Custom exceptions for gfm2mdx."""


class Gfm2mdxError(Exception):
    """Base exception for gfm2mdx operations."""


class ParseError(Gfm2mdxError):
    """Error while parsing Markdown into a document tree."""


class ConversionError(Gfm2mdxError):
    """Error while printing a document tree back to text."""
