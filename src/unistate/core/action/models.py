"""Entity action models.

Actions are immutable descriptions of an intended change. They are never
applied directly, only interpreted by a reducer, and are shared by reference
across the whole reducer chain.

Usage:
    AddEntity(Todo(1, "write docs"))
    UpdateEntity(Todo(1, "write better docs"))
    RemoveEntity(1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AddEntity(Generic[T]):
    """Insert a new entity. Its id must not already exist."""

    entity: T


@dataclass(frozen=True, slots=True)
class UpdateEntity(Generic[T]):
    """Replace the entity bound to ``entity.id``. The id must already exist."""

    entity: T


@dataclass(frozen=True, slots=True)
class RemoveEntity:
    """Remove the entity bound to ``id``. The id must already exist."""

    id: int


type EntityAction[T] = AddEntity[T] | UpdateEntity[T] | RemoveEntity
"""Closed union of the generic entity actions."""
