"""Selectors: pure projections of state.

Usage:
    select_todos = select_field("todos")
    select_second = select_entity("todos", 2)

    # Memoized derived selector, recomputed only when an input changes
    select_open = create_selector(
        select_todos,
        combiner=lambda todos: [t for t in todos if not t.done],
    )
    store.select(select_open)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from unistate.core.types import Selector

S = TypeVar("S")
R = TypeVar("R")


class MemoizedSelector(Generic[S, R]):
    """Selector caching its last result.

    Inputs are compared by identity, which is sufficient because state is
    immutable: an unchanged sub-state is the same object.
    """

    __slots__ = ("_inputs", "_combiner", "_cache", "recomputations")

    def __init__(self, inputs: tuple[Selector[S, Any], ...], combiner: Callable[..., R]) -> None:
        self._inputs = inputs
        self._combiner = combiner
        # args and result are read and written together as one tuple
        self._cache: tuple[tuple[Any, ...], R] | None = None
        self.recomputations = 0

    def __call__(self, state: S) -> R:
        args = tuple(selector(state) for selector in self._inputs)
        cache = self._cache
        if cache is not None and all(a is b for a, b in zip(cache[0], args, strict=True)):
            return cache[1]
        result = self._combiner(*args)
        self._cache = (args, result)
        self.recomputations += 1
        return result

    def clear(self) -> None:
        """Drop the cached result."""
        self._cache = None


def create_selector(
    *inputs: Selector[S, Any], combiner: Callable[..., R]
) -> MemoizedSelector[S, R]:
    """Create a memoized selector from input selectors and a combiner.

    Raises:
        ValueError: If no input selectors are given.
    """
    if not inputs:
        raise ValueError("create_selector() needs at least one input selector")
    return MemoizedSelector(inputs, combiner)


def select_field(name: str) -> Selector[Any, Any]:
    """Selector returning one attribute of the state."""

    def selector(state: Any) -> Any:
        return getattr(state, name)

    selector.__name__ = f"select_{name}"
    return selector


def select_entity(field: str, entity_id: int) -> Selector[Any, Any]:
    """Selector returning one entity of a collection field, or None."""

    def selector(state: Any) -> Any:
        return getattr(state, field).get(entity_id)

    selector.__name__ = f"select_{field}_{entity_id}"
    return selector
