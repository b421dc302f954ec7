"""
Topic forest assembly for Blocktree.

Merges slash-delimited paths into a forest of labeled nodes that shares
common prefixes, and converts the forest to and from its flat storage form.
Sibling order is first-occurrence order, never alphabetical.
"""

import logging
from typing import Any, Dict, List, Optional

from ..models import FlatTreeNode, TreeNode
from .extractor import split_path


def _find_or_append(level: List[Dict[str, Any]], label: str) -> Dict[str, Any]:
    for node in level:
        if node['label'] == label:
            return node
    node = {'label': label, 'children': []}
    level.append(node)
    return node


def build_topic_forest(paths: List[str]) -> List[TreeNode]:
    """
    Build the topic forest of a list of paths.

    Args:
        paths: Slash-delimited paths, processed in order

    Returns:
        Root topic nodes; paths sharing a prefix share its nodes
    """
    roots: List[Dict[str, Any]] = []

    for path in paths:
        current_level = roots
        for part in split_path(path):
            current_level = _find_or_append(current_level, part)['children']

    return [TreeNode.model_validate(node) for node in roots]


def flatten_topic_forest(forest: List[TreeNode]) -> List[FlatTreeNode]:
    """
    Flatten a topic forest in pre-order, referencing parents by label.
    """
    flat_nodes: List[FlatTreeNode] = []
    stack = [(node, None) for node in reversed(forest)]

    while stack:
        node, parent = stack.pop()
        flat_nodes.append(FlatTreeNode(label=node.label, parent=parent))
        stack.extend((child, node.label) for child in reversed(node.children))

    return flat_nodes


def rebuild_topic_forest(flat_nodes: List[FlatTreeNode]) -> List[TreeNode]:
    """
    Rebuild a topic forest from its flat pre-order form.

    Each record attaches under the most recently seen node carrying its
    parent label. When the same label recurs on different branches the
    result follows the latest one.

    Args:
        flat_nodes: Records as produced by flatten_topic_forest

    Returns:
        Root topic nodes
    """
    roots: List[Dict[str, Any]] = []
    latest: Dict[str, Dict[str, Any]] = {}

    for flat_node in flat_nodes:
        parent: Optional[Dict[str, Any]] = None
        if flat_node.parent is not None:
            parent = latest.get(flat_node.parent)
            if parent is None:
                logging.warning(f"Topic '{flat_node.label}' references unknown parent '{flat_node.parent}'; treating it as a root")

        level = parent['children'] if parent else roots
        latest[flat_node.label] = _find_or_append(level, flat_node.label)

    return [TreeNode.model_validate(node) for node in roots]
