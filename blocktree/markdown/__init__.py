"""Markdown classification, parsing and re-serialization."""

from .classifier import classify, heading_level
from .sections import description, heading_label, link_path
from .parser import parse_markdown, split_blocks
from .serializer import to_markdown, forest_to_markdown

__all__ = [
    "classify",
    "heading_level",
    "description",
    "heading_label",
    "link_path",
    "parse_markdown",
    "split_blocks",
    "to_markdown",
    "forest_to_markdown"
]
