"""
Block data models for Blocktree.

This module defines the typed content blocks a markdown document is compiled
into, in the three shapes they travel in: the freshly parsed tree, the
id-tagged tree, and the flat storage projection.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """The closed set of semantic block types."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    UNORDERED_LIST = "unordered-list"
    ORDERED_LIST = "ordered-list"
    TASK_LIST = "task-list"
    BLOCKQUOTE = "blockquote"
    CODEBLOCK = "codeblock"
    IMAGE = "image"


class MdBlock(BaseModel):
    """
    A parsed markdown block and the blocks nested under it.

    Only headings carry children: everything between a heading and the next
    heading of equal or shallower level.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        description="The verbatim source text of the block, possibly multi-line"
    )

    type: BlockType = Field(
        ...,
        description="The semantic type assigned by the classifier"
    )

    tree: str = Field(
        default="",
        description="Slash-joined path of the enclosing heading labels, empty for roots"
    )

    order: int = Field(
        default=0,
        description="Zero-based position among siblings"
    )

    children: List['MdBlock'] = Field(
        default_factory=list,
        description="Blocks nested under this heading, ordered by 'order'"
    )


class MdBlockWithId(MdBlock):
    """
    An MdBlock tagged with a unique id and a reference to its parent's id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(
        ...,
        description="Globally unique identifier, assigned once"
    )

    parent_id: Optional[str] = Field(
        default=None,
        alias="parentId",
        description="Id of the parent block, None for roots"
    )

    children: List['MdBlockWithId'] = Field(
        default_factory=list,
        description="Id-tagged child blocks"
    )


class FlatMdBlock(BaseModel):
    """
    The storage-ready projection of an MdBlockWithId: the same fields
    without the children container, which is recoverable from parent_id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    text: str
    type: BlockType
    tree: str = ""
    order: int = 0


# Enable forward references for self-referencing models
MdBlock.model_rebuild()
MdBlockWithId.model_rebuild()
