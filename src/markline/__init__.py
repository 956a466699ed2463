"""Markline - line-oriented markdown to HTML converter."""

from markline.core.converter import MarkdownConverter, convert
from markline.core.document import DocumentBuilder
from markline.core.matching import DEFAULT_RULES, MatchChain, try_strip
from markline.core.tags import DEFAULT_TAG_CATALOG, TagCatalog
from markline.core.types import ElementKind, MatchRule

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_TAG_CATALOG",
    "DocumentBuilder",
    "ElementKind",
    "MarkdownConverter",
    "MatchChain",
    "MatchRule",
    "TagCatalog",
    "convert",
    "try_strip",
]
