"""
Exceptions raised by Blocktree.

Parsing and topic operations never raise for malformed markdown; the only
failures surfaced come from the identifier generator collaborator.
"""


class BlockTreeError(Exception):
    """Base class for all Blocktree errors."""


class IdGenerationError(BlockTreeError):
    """The identifier generator failed to produce a usable id."""


class IdGeneratorExhausted(IdGenerationError):
    """A scripted identifier generator ran out of ids."""


class DuplicateIdError(IdGenerationError):
    """The identifier generator returned an id that was already assigned."""

    def __init__(self, block_id: str):
        super().__init__(f"Identifier generator returned a duplicate id: {block_id}")
        self.block_id = block_id
