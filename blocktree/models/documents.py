"""
Document models for Blocktree.
"""

from pydantic import BaseModel, Field


class MarkdownDocument(BaseModel):
    """
    A raw markdown document delivered by an importer.
    """

    document_id: str = Field(
        ...,
        description="A stable identifier for the document within its source"
    )

    source_ref: str = Field(
        ...,
        description="A human-readable reference to the source (e.g., file path)"
    )

    content: str = Field(
        ...,
        description="The full markdown text"
    )
