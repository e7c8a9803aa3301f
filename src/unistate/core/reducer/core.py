"""Entity reducer and reducer composition.

Usage:
    # Entity reducer over one collection
    todos = entity_reducer(todos, AddEntity(Todo(1, "write docs")))

    # Lift it onto a field of a larger, immutable state
    reducer = on_field("todos", entity_reducer)
    state = reducer(RootState(), AddEntity(Todo(1, "write docs")))

    # Several field reducers contributing to one state
    reducer = combine_reducers(todos=entity_reducer, log=log_reducer)

    # Sequential fold, same as Store.dispatch
    reducer = compose_reducers(crud_reducer, history_reducer)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from unistate.core.action.models import AddEntity, RemoveEntity, UpdateEntity
from unistate.core.collection import Collection
from unistate.core.types import Reducer

S = TypeVar("S")
A = TypeVar("A")
T = TypeVar("T")


def entity_reducer(collection: Collection[Any], action: object) -> Collection[Any]:
    """Translate an entity action into a new collection.

    Any action that is not one of AddEntity, UpdateEntity or RemoveEntity
    leaves the collection unchanged, so this reducer can share a chain with
    domain reducers.

    Raises:
        DuplicateIdError: AddEntity with an id already present.
        NotFoundError: UpdateEntity or RemoveEntity with an absent id.
    """
    match action:
        case AddEntity(entity=entity):
            return collection.add(entity)
        case UpdateEntity(entity=entity):
            return collection.update(entity)
        case RemoveEntity(id=entity_id):
            return collection.remove(entity_id)
        case _:
            return collection


def apply_reducers(reducers: Iterable[Reducer[S, A]], state: S, action: A) -> S:
    """Fold action through reducers in order, each consuming the previous output."""
    return reduce(lambda current, reducer: reducer(current, action), reducers, state)


def compose_reducers(*reducers: Reducer[S, A]) -> Reducer[S, A]:
    """Chain reducers into one that applies them left to right."""
    chain = tuple(reducers)

    def composed(state: S, action: A) -> S:
        return apply_reducers(chain, state, action)

    return composed


def replace_field(state: S, name: str, value: Any) -> S:
    """Return state with one field replaced.

    Supports dataclass instances and pyrsistent records (anything with ``set``).
    Returns state itself when value is the current field value.

    Raises:
        TypeError: If state is neither a dataclass nor a pyrsistent record.
    """
    if getattr(state, name) is value:
        return state
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return dataclasses.replace(state, **{name: value})
    setter = getattr(state, "set", None)
    if callable(setter):
        return setter(name, value)
    raise TypeError(f"Cannot replace field {name!r} on {type(state).__name__}")


def on_field(name: str, reducer: Callable[[T, A], T]) -> Reducer[Any, A]:
    """Lift a sub-state reducer to a reducer over the state field ``name``."""

    def field_reducer(state: Any, action: A) -> Any:
        return replace_field(state, name, reducer(getattr(state, name), action))

    field_reducer.__name__ = f"on_field_{name}"
    return field_reducer


def combine_reducers(**field_reducers: Callable[[Any, A], Any]) -> Reducer[Any, A]:
    """Build a state reducer from per-field reducers, applied in keyword order.

    Each field reducer sees only its own field and must return it unchanged
    for actions it does not handle.
    """
    return compose_reducers(*(on_field(name, fn) for name, fn in field_reducers.items()))
