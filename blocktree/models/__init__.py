"""Data models for Blocktree."""

from .blocks import BlockType, MdBlock, MdBlockWithId, FlatMdBlock
from .topics import TreeNode, FlatTreeNode
from .documents import MarkdownDocument

__all__ = [
    "BlockType",
    "MdBlock",
    "MdBlockWithId",
    "FlatMdBlock",
    "TreeNode",
    "FlatTreeNode",
    "MarkdownDocument"
]
