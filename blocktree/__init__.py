"""
Blocktree: a markdown-to-hierarchy compiler.

Converts flat markdown documents into trees of typed content blocks, derives
a topic tree from wiki-style link annotations in headings, and serializes
block trees back to markdown.
"""

__version__ = "0.1.0"
__author__ = "Blocktree Project"

# Import main components
from .models import (
    BlockType,
    MdBlock,
    MdBlockWithId,
    FlatMdBlock,
    TreeNode,
    FlatTreeNode,
    MarkdownDocument
)
from .markdown import classify, heading_level, description, parse_markdown, to_markdown, forest_to_markdown
from .topics import collect_trees, collect_topics, build_topic_forest, flatten_topic_forest, rebuild_topic_forest
from .identity import (
    IdGenerator,
    UUIDGenerator,
    CounterIdGenerator,
    SequenceIdGenerator,
    assign_ids,
    flatten_blocks,
    rebuild_blocks
)
from .pipeline import ingest_markdown, aggregate_topics, export_markdown
from .importers import BaseImporter, MarkdownDirectoryImporter

__all__ = [
    "BlockType",
    "MdBlock",
    "MdBlockWithId",
    "FlatMdBlock",
    "TreeNode",
    "FlatTreeNode",
    "MarkdownDocument",
    "classify",
    "heading_level",
    "description",
    "parse_markdown",
    "to_markdown",
    "forest_to_markdown",
    "collect_trees",
    "collect_topics",
    "build_topic_forest",
    "flatten_topic_forest",
    "rebuild_topic_forest",
    "IdGenerator",
    "UUIDGenerator",
    "CounterIdGenerator",
    "SequenceIdGenerator",
    "assign_ids",
    "flatten_blocks",
    "rebuild_blocks",
    "ingest_markdown",
    "aggregate_topics",
    "export_markdown",
    "BaseImporter",
    "MarkdownDirectoryImporter"
]
