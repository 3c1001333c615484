"""Shared schemas for gfm2mdx."""

from gfm2mdx.schemas.front_matter import FrontMatter

__all__ = ["FrontMatter"]
