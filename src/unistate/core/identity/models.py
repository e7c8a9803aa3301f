"""Entity identity models.

Usage:
    @dataclass(frozen=True, slots=True)
    class Todo:
        id: int
        task: str

    isinstance(Todo(1, "x"), Identifiable)  # True
    identity_of(Todo(1, "x"))  # 1
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Any value exposing a stable, unique integer identity."""

    @property
    def id(self) -> int: ...


def identity_of(entity: Identifiable) -> int:
    """Return the identity of an entity.

    Raises:
        TypeError: If the entity has no integer ``id``.
    """
    entity_id = getattr(entity, "id", None)
    if not is_entity_id(entity_id):
        raise TypeError(f"{type(entity).__name__} is not Identifiable: expected an int 'id'")
    return entity_id


def is_entity_id(value: object) -> bool:
    """True for int ids; bool is rejected since True == 1 would alias entity 1."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_entity_id(value: object) -> int:
    """Return value if it is a valid entity id.

    Raises:
        TypeError: If value is not an int (or is a bool).
    """
    if not is_entity_id(value):
        raise TypeError(f"Entity id must be an int, got {type(value).__name__}")
    return value  # type: ignore[return-value]
