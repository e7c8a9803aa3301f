"""Error taxonomy shared by collections, reducers and the store."""

from __future__ import annotations


class UnistateError(Exception):
    """Base class for all unistate errors."""


class DuplicateIdError(UnistateError, KeyError):
    """Raised when adding an entity whose id already exists in a collection."""

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"Entity {entity_id} already exists")

    def __str__(self) -> str:
        return self.args[0]


class NotFoundError(UnistateError, KeyError):
    """Raised when updating, removing or modifying an id that is not present."""

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"Entity {entity_id} does not exist")

    def __str__(self) -> str:
        return self.args[0]


class ReentrantDispatchError(UnistateError, RuntimeError):
    """Raised when dispatch is called from inside a running dispatch cycle."""
