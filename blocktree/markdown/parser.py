"""
Markdown tree builder for Blocktree.

Groups the lines of a markdown document into blocks, nests each block under
the heading it belongs to and records the heading path it lives under.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..models import BlockType, MdBlock
from .classifier import classify, heading_level
from .sections import heading_label, link_path

FENCE_PREFIX = '```'


def _split_leveled_blocks(markdown: str) -> List[Tuple[str, int]]:
    """
    Split a markdown document into (block text, heading level) pairs.

    The level is taken from the raw heading line, so an empty heading such
    as "# " keeps level 1. Heading lines are kept verbatim; every other
    block loses trailing whitespace and has level 0.
    """
    lines = markdown.replace('\r\n', '\n').replace('\r', '\n').split('\n')

    blocks: List[Tuple[str, int]] = []
    current: List[str] = []
    in_fence = False

    def flush():
        text = '\n'.join(current).rstrip()
        if text.strip():
            blocks.append((text, 0))
        current.clear()

    for line in lines:
        if in_fence:
            current.append(line)
            if line.startswith(FENCE_PREFIX):
                in_fence = False
                flush()
            continue

        if line.startswith(FENCE_PREFIX):
            flush()
            current.append(line)
            in_fence = True
            continue

        if not line.strip():
            flush()
            continue

        level = heading_level(line)
        if level > 0:
            flush()
            blocks.append((line, level))
            continue

        current.append(line)

    flush()
    return blocks


def split_blocks(markdown: str) -> List[str]:
    """
    Split a markdown document into raw block texts.

    Blank lines separate blocks, a proper heading line is always a block of
    its own, and a fenced code block is kept whole, blank lines included.
    An unclosed fence runs to the end of the document.

    Args:
        markdown: Raw markdown text

    Returns:
        Block texts in document order
    """
    return [text for text, _ in _split_leveled_blocks(markdown)]


def _heading_path(text: str, parent_path: str) -> str:
    """
    Compute the path a heading opens for the blocks nested under it.

    A wiki-link annotation already holds the absolute chain; a plain heading
    extends its parent's path.
    """
    if link_path(text) is not None:
        return heading_label(text)

    label = heading_label(text)
    if not label:
        return parent_path
    return f"{parent_path}/{label}" if parent_path else label


def _new_node(text: str, block_type: BlockType, tree: str, siblings: List[Dict[str, Any]]) -> Dict[str, Any]:
    node = {
        'text': text,
        'type': block_type,
        'tree': tree,
        'order': len(siblings),
        'children': [],
    }
    siblings.append(node)
    return node


def parse_markdown(markdown: str) -> List[MdBlock]:
    """
    Parse a markdown document into a forest of MdBlocks.

    Every block nests under the most recent open heading. A heading of
    level L first closes every open heading of level L or deeper. Blocks
    that start with '#' but are not proper headings (e.g. "#tag") are
    classified as headings yet never open a scope.

    Args:
        markdown: Raw markdown text

    Returns:
        The root blocks of the document, each with its nested children
    """
    roots: List[Dict[str, Any]] = []
    # (node, level, path) for every open heading, outermost first
    stack: List[tuple] = []

    for text, level in _split_leveled_blocks(markdown):
        block_type = classify(text)

        if level > 0:
            while stack and stack[-1][1] >= level:
                stack.pop()

        parent: Optional[tuple] = stack[-1] if stack else None
        siblings = parent[0]['children'] if parent else roots
        parent_path = parent[2] if parent else ''

        node = _new_node(text, block_type, parent_path, siblings)

        if level > 0:
            stack.append((node, level, _heading_path(text, parent_path)))

    logging.debug(f"Parsed markdown into {len(roots)} root blocks")
    return [MdBlock.model_validate(node) for node in roots]
