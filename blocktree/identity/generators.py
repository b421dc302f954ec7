"""
Identifier generators for Blocktree.

This module defines the interface of the identifier generator collaborator
and the stock implementations used in production and in tests.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from ..exceptions import IdGeneratorExhausted


class IdGenerator(ABC):
    """
    Abstract base class for identifier generators.

    Every call to next_id() must return a fresh value that no other call
    across the process lifetime returns.
    """

    @abstractmethod
    def next_id(self) -> str:
        """
        Produce the next unique identifier.

        Returns:
            A globally unique string id
        """
        pass

    def __call__(self) -> str:
        return self.next_id()


class UUIDGenerator(IdGenerator):
    """Random UUID4 identifiers; the production default."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


class CounterIdGenerator(IdGenerator):
    """
    Deterministic identifiers of the form '<prefix><n>', counting from 1.

    Only unique within one generator instance.
    """

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._next = start

    def next_id(self) -> str:
        value = f"{self.prefix}{self._next}"
        self._next += 1
        return value


class SequenceIdGenerator(IdGenerator):
    """
    Scripted identifiers taken from a fixed sequence.

    Raises IdGeneratorExhausted once the sequence runs out.
    """

    def __init__(self, ids: Iterable[str]):
        self._ids: Iterator[str] = iter(ids)
        self.issued = 0

    def next_id(self) -> str:
        try:
            value = next(self._ids)
        except StopIteration:
            raise IdGeneratorExhausted(
                f"Identifier sequence exhausted after {self.issued} ids"
            ) from None
        self.issued += 1
        return value


def create_id_generator(kind: str = "uuid", prefix: str = "id") -> IdGenerator:
    """
    Create an identifier generator by name.

    Args:
        kind: "uuid" or "counter"; unknown kinds fall back to "uuid"
        prefix: Prefix for counter ids

    Returns:
        A new IdGenerator
    """
    if kind == "counter":
        return CounterIdGenerator(prefix=prefix)
    return UUIDGenerator()
