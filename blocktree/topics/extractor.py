"""
Topic extraction for Blocktree.

Collects the distinct tree paths referenced by a block forest and the
distinct topic segments those paths are made of.
"""

from typing import Any, Iterable, List, Set

PATH_SEPARATOR = '/'


def collect_trees(blocks: Iterable[Any]) -> List[str]:
    """
    Collect every distinct non-empty tree path of a block forest.

    Works on nested forests and on flat record lists alike: any object with
    a 'tree' attribute and an optional 'children' list is walked.

    Args:
        blocks: Root blocks (or flat records)

    Returns:
        Distinct paths, sorted ascending
    """
    trees: Set[str] = set()
    stack = list(blocks)

    while stack:
        block = stack.pop()
        if block.tree != '':
            trees.add(block.tree)
        stack.extend(getattr(block, 'children', None) or [])

    return sorted(trees)


def split_path(path: str) -> List[str]:
    """Split a tree path into trimmed segments."""
    return [part.strip() for part in path.split(PATH_SEPARATOR)]


def collect_topics(paths: Iterable[str]) -> List[str]:
    """
    Collect every distinct topic segment of a list of tree paths.

    Args:
        paths: Slash-delimited paths

    Returns:
        Distinct trimmed segments, sorted ascending
    """
    topics: Set[str] = set()

    for path in paths:
        topics.update(split_path(path))

    return sorted(topics)
