"""Identifier generation and id-tagged tree handling."""

from .generators import (
    IdGenerator,
    UUIDGenerator,
    CounterIdGenerator,
    SequenceIdGenerator,
    create_id_generator
)
from .assignment import assign_ids, flatten_blocks, rebuild_blocks

__all__ = [
    "IdGenerator",
    "UUIDGenerator",
    "CounterIdGenerator",
    "SequenceIdGenerator",
    "create_id_generator",
    "assign_ids",
    "flatten_blocks",
    "rebuild_blocks"
]
