"""
Id assignment, flattening and reconstruction of block trees.

Ids are drawn from an injected identifier generator in depth-first pre-order,
so a deterministic generator yields deterministic trees.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Set, Union

from ..exceptions import DuplicateIdError
from ..models import FlatMdBlock, MdBlock, MdBlockWithId
from .generators import IdGenerator, UUIDGenerator

IdSource = Union[IdGenerator, Callable[[], str]]


def _resolve_next_id(id_generator: Optional[IdSource]) -> Callable[[], str]:
    if id_generator is None:
        return UUIDGenerator().next_id
    if isinstance(id_generator, IdGenerator):
        return id_generator.next_id
    return id_generator


def assign_ids(blocks: List[MdBlock], id_generator: Optional[IdSource] = None) -> List[MdBlockWithId]:
    """
    Tag every block of a forest with a unique id and its parent's id.

    The generator is called exactly once per block in pre-order. A failure
    raised by the generator propagates and no partially tagged tree is
    returned. The input tree is left untouched.

    Args:
        blocks: Root blocks of a parsed document
        id_generator: An IdGenerator or zero-argument callable; defaults to
            a fresh UUIDGenerator

    Returns:
        A new forest of MdBlockWithId

    Raises:
        DuplicateIdError: If the generator repeats an id within the forest
    """
    next_id = _resolve_next_id(id_generator)
    seen: Set[str] = set()

    def assign_id_recursively(block: MdBlock, parent_id: Optional[str]) -> MdBlockWithId:
        new_id = next_id()
        if new_id in seen:
            raise DuplicateIdError(new_id)
        seen.add(new_id)

        return MdBlockWithId(
            id=new_id,
            parent_id=parent_id,
            text=block.text,
            type=block.type,
            tree=block.tree,
            order=block.order,
            children=[assign_id_recursively(child, new_id) for child in block.children],
        )

    return [assign_id_recursively(block, None) for block in blocks]


def flatten_blocks(blocks: List[MdBlockWithId]) -> List[FlatMdBlock]:
    """
    Flatten an id-tagged forest into storage records, in pre-order.
    """
    flat_blocks: List[FlatMdBlock] = []
    stack = list(reversed(blocks))

    while stack:
        block = stack.pop()
        flat_blocks.append(FlatMdBlock(
            id=block.id,
            parent_id=block.parent_id,
            text=block.text,
            type=block.type,
            tree=block.tree,
            order=block.order,
        ))
        stack.extend(reversed(block.children))

    return flat_blocks


def rebuild_blocks(records: List[FlatMdBlock]) -> List[MdBlockWithId]:
    """
    Reconstruct the nested forest from flat storage records.

    Children are attached through parent_id and sorted by order. Records
    pointing at an unknown parent are promoted to roots; records only
    reachable through a cycle are dropped.

    Args:
        records: Flat records, in any order

    Returns:
        The id-tagged forest
    """
    known_ids = {record.id for record in records}
    children_by_parent: Dict[Optional[str], List[FlatMdBlock]] = defaultdict(list)

    for record in records:
        parent_id = record.parent_id
        if parent_id is not None and parent_id not in known_ids:
            logging.warning(f"Block {record.id} references unknown parent {parent_id}; treating it as a root")
            parent_id = None
        children_by_parent[parent_id].append(record)

    built: Set[str] = set()

    def build(record: FlatMdBlock, parent_id: Optional[str]) -> MdBlockWithId:
        built.add(record.id)
        children = sorted(children_by_parent.get(record.id, []), key=lambda child: child.order)
        return MdBlockWithId(
            id=record.id,
            parent_id=parent_id,
            text=record.text,
            type=record.type,
            tree=record.tree,
            order=record.order,
            children=[build(child, record.id) for child in children if child.id not in built],
        )

    roots = sorted(children_by_parent.get(None, []), key=lambda root: root.order)
    forest = [build(root, None) for root in roots]

    unreachable = len(known_ids) - len(built)
    if unreachable:
        logging.warning(f"Dropped {unreachable} blocks not reachable from any root")

    return forest
