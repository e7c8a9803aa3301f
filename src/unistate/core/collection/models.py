"""Persistent entity collection.

A Collection keeps entities in insertion order and indexes them by identity.
Every mutating operation returns a new Collection; the receiver is never
modified, so old snapshots stay valid for anyone still holding them.

Usage:
    todos = Collection.empty().add(Todo(1, "write tests")).add(Todo(2, "ship"))
    todos = todos.update(Todo(2, "ship it"))
    todos = todos.remove(1)
    todos.ids  # (2,)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar, overload

from pyrsistent import PMap, PVector, pmap, pvector

from unistate.core.errors import DuplicateIdError, NotFoundError
from unistate.core.identity import Identifiable, identity_of, is_entity_id, require_entity_id

T = TypeVar("T", bound=Identifiable)
D = TypeVar("D")


@dataclass(frozen=True, slots=True, repr=False)
class Collection(Generic[T]):
    """Ordered, identity-indexed, immutable set of entities.

    Structure:
        order: ids in insertion order, no duplicates
        by_id: id -> entity

    Both structures are pyrsistent values, so each operation shares all
    untouched nodes with the collection it was derived from. ``remove`` scans
    ``order`` linearly; ``add``, ``update`` and ``get`` are logarithmic.

    Build instances with ``empty()`` or ``of()``; the raw constructor does not
    check that ``order`` and ``by_id`` agree.
    """

    order: PVector[int] = field(default_factory=pvector)
    by_id: PMap[int, T] = field(default_factory=pmap)

    @classmethod
    def empty(cls) -> Collection[T]:
        """Create a collection with no entities."""
        return cls()

    @classmethod
    def of(cls, *entities: T) -> Collection[T]:
        """Create a collection by adding each entity in order.

        Raises:
            DuplicateIdError: If two entities share an id.
        """
        collection: Collection[T] = cls()
        for entity in entities:
            collection = collection.add(entity)
        return collection

    def add(self, entity: T) -> Collection[T]:
        """Return a new collection with entity appended.

        Raises:
            DuplicateIdError: If an entity with the same id is already present.
        """
        entity_id = identity_of(entity)
        if entity_id in self.by_id:
            raise DuplicateIdError(entity_id)
        return Collection(
            order=self.order.append(entity_id),
            by_id=self.by_id.set(entity_id, entity),
        )

    def update(self, entity: T) -> Collection[T]:
        """Return a new collection with the entity bound to its id replaced.

        Order is unchanged.

        Raises:
            NotFoundError: If no entity with that id is present.
        """
        entity_id = identity_of(entity)
        if entity_id not in self.by_id:
            raise NotFoundError(entity_id)
        return Collection(order=self.order, by_id=self.by_id.set(entity_id, entity))

    def remove(self, entity_id: int) -> Collection[T]:
        """Return a new collection without the entity bound to entity_id.

        Raises:
            TypeError: If entity_id is not an int.
            NotFoundError: If no entity with that id is present.
        """
        require_entity_id(entity_id)
        if entity_id not in self.by_id:
            raise NotFoundError(entity_id)
        return Collection(
            order=self.order.remove(entity_id),
            by_id=self.by_id.remove(entity_id),
        )

    def modify(self, entity_id: int, fn: Callable[[T], T]) -> Collection[T]:
        """Return a new collection with fn applied to one entity.

        Used by domain reducers for field-level changes, e.g.
        ``todos.modify(2, lambda t: replace(t, done=True))``.

        Raises:
            TypeError: If entity_id is not an int.
            NotFoundError: If no entity with that id is present.
            ValueError: If fn returns an entity with a different id.
        """
        require_entity_id(entity_id)
        if entity_id not in self.by_id:
            raise NotFoundError(entity_id)
        changed = fn(self.by_id[entity_id])
        changed_id = identity_of(changed)
        if changed_id != entity_id:
            raise ValueError(
                f"modify() must keep the entity id: got {changed_id}, expected {entity_id}"
            )
        return self.update(changed)

    @overload
    def get(self, entity_id: int) -> T | None: ...

    @overload
    def get(self, entity_id: int, default: D) -> T | D: ...

    def get(self, entity_id: int, default: object = None) -> object:
        """Get entity by id, or default if absent.

        Raises:
            TypeError: If entity_id is not an int.
        """
        return self.by_id.get(require_entity_id(entity_id), default)

    def all(self) -> tuple[T, ...]:
        """All entities in insertion order."""
        return tuple(self.by_id[entity_id] for entity_id in self.order)

    @property
    def ids(self) -> tuple[int, ...]:
        """Entity ids in insertion order."""
        return tuple(self.order)

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, entity_id: object) -> bool:
        return is_entity_id(entity_id) and entity_id in self.by_id

    def __iter__(self) -> Iterator[T]:
        for entity_id in self.order:
            yield self.by_id[entity_id]

    def __repr__(self) -> str:
        return f"Collection({list(self)!r})"
