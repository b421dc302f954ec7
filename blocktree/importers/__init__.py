"""Document importers for markdown sources."""

from .base import BaseImporter
from .markdown_files import MarkdownDirectoryImporter

__all__ = ["BaseImporter", "MarkdownDirectoryImporter"]
