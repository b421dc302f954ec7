"""
Ingestion, topic aggregation and export flows for Blocktree.

Each flow composes the pure operations of the markdown, identity and topics
packages: raw markdown to storage records, stored trees to topics, and stored
trees back to markdown.
"""

import logging
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .identity import assign_ids, flatten_blocks, rebuild_blocks
from .identity.assignment import IdSource
from .markdown import description, forest_to_markdown, parse_markdown
from .models import FlatMdBlock, FlatTreeNode, MdBlockWithId, TreeNode
from .topics import build_topic_forest, collect_topics, collect_trees, flatten_topic_forest


class IngestResult(BaseModel):
    """
    Everything produced by ingesting one markdown document.
    """

    model_config = ConfigDict(frozen=True)

    blocks: List[MdBlockWithId] = Field(
        default_factory=list,
        description="The id-tagged block forest"
    )

    records: List[FlatMdBlock] = Field(
        default_factory=list,
        description="The flat storage projection of 'blocks', in pre-order"
    )

    description: str = Field(
        default="",
        description="Text between the first heading and the next one"
    )

    trees: List[str] = Field(
        default_factory=list,
        description="Distinct tree paths referenced by the document, sorted"
    )

    topics: List[str] = Field(
        default_factory=list,
        description="Distinct topic segments of those paths, sorted"
    )


class TopicSummary(BaseModel):
    """
    Topics aggregated across stored documents.
    """

    model_config = ConfigDict(frozen=True)

    paths: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)
    forest: List[TreeNode] = Field(default_factory=list)
    flat_forest: List[FlatTreeNode] = Field(default_factory=list)


def ingest_markdown(markdown: str, id_generator: Optional[IdSource] = None) -> IngestResult:
    """
    Compile a markdown document into id-tagged blocks and storage records.

    Args:
        markdown: Raw markdown text
        id_generator: Identifier generator collaborator; UUIDs by default

    Returns:
        An IngestResult
    """
    parsed = parse_markdown(markdown)
    blocks = assign_ids(parsed, id_generator)
    records = flatten_blocks(blocks)
    trees = collect_trees(parsed)

    logging.info(f"Ingested document into {len(records)} blocks under {len(trees)} tree paths")

    return IngestResult(
        blocks=blocks,
        records=records,
        description=description(markdown),
        trees=trees,
        topics=collect_topics(trees),
    )


def aggregate_topics(sources: Sequence[Any]) -> TopicSummary:
    """
    Aggregate the topics of stored documents.

    Args:
        sources: Block forests, flat records, or plain path strings

    Returns:
        A TopicSummary; the forest keeps first-occurrence order of the
        sorted path list
    """
    path_strings = [source for source in sources if isinstance(source, str)]
    blocks = [source for source in sources if not isinstance(source, str)]

    paths = sorted(set(collect_trees(blocks)) | {path for path in path_strings if path})
    forest = build_topic_forest(paths)

    logging.debug(f"Aggregated {len(paths)} tree paths into {len(forest)} root topics")

    return TopicSummary(
        paths=paths,
        topics=collect_topics(paths),
        forest=forest,
        flat_forest=flatten_topic_forest(forest),
    )


def export_markdown(blocks: Sequence[Any]) -> str:
    """
    Reconstruct a markdown document from stored blocks.

    Args:
        blocks: Either flat FlatMdBlock records or a nested block forest

    Returns:
        The markdown text
    """
    blocks = list(blocks)
    if blocks and all(isinstance(block, FlatMdBlock) for block in blocks):
        blocks = rebuild_blocks(blocks)
    return forest_to_markdown(blocks)
