"""
Markdown re-serialization for Blocktree.

Reconstructs markdown text from block trees. The output parses back into the
same block structure.
"""

from typing import Any, List, Sequence

BLOCK_SEPARATOR = '\n\n'


def _sorted_children(block: Any) -> List[Any]:
    children = getattr(block, 'children', None) or []
    return sorted(children, key=lambda child: child.order)


def _build_markdown(block: Any) -> str:
    markdown = getattr(block, 'text', None) or ''

    for child in _sorted_children(block):
        markdown += BLOCK_SEPARATOR + _build_markdown(child)

    return markdown


def to_markdown(root: Any) -> str:
    """
    Reconstruct the markdown text of a block and everything nested under it.

    Accepts MdBlock, MdBlockWithId or any stored block object exposing
    'text', 'order' and an optional 'children' list.

    Args:
        root: The block to serialize

    Returns:
        The block's text followed by each child, in order, separated by a
        blank line; trimmed
    """
    if root is None:
        return ''
    return _build_markdown(root).strip()


def forest_to_markdown(blocks: Sequence[Any]) -> str:
    """
    Reconstruct a whole document from its root blocks.
    """
    parts = [to_markdown(block) for block in sorted(blocks, key=lambda block: block.order)]
    return BLOCK_SEPARATOR.join(part for part in parts if part)
