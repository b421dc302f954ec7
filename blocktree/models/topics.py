"""
Topic models for Blocktree.

Topics are the slash-delimited segments of block tree paths. They are
assembled into a forest of labeled nodes and flattened for storage.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TreeNode(BaseModel):
    """
    A node of the topic forest. Sibling labels are unique.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(
        ...,
        description="The trimmed topic segment"
    )

    children: List['TreeNode'] = Field(
        default_factory=list,
        description="Child topics in first-occurrence order"
    )


class FlatTreeNode(BaseModel):
    """
    A flattened topic node. The parent is referenced by label, which is only
    unambiguous when labels are unique along every path.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    parent: Optional[str] = None


TreeNode.model_rebuild()
