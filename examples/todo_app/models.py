"""Todo domain model and action vocabulary."""

from __future__ import annotations

from dataclasses import dataclass, field

from unistate import Collection, EntityAction


@dataclass(frozen=True, slots=True)
class Todo:
    id: int
    task: str
    done: bool = False


@dataclass(frozen=True, slots=True)
class RootState:
    todos: Collection[Todo] = field(default_factory=Collection.empty)
    history: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TodoEntity:
    """Wraps a generic entity action targeting the todos collection."""

    action: EntityAction[Todo]


@dataclass(frozen=True, slots=True)
class MarkDone:
    id: int
    done: bool = True


@dataclass(frozen=True, slots=True)
class ChangeText:
    id: int
    text: str


type TodoAction = TodoEntity | MarkDone | ChangeText
