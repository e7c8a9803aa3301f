"""Selector/observer registrations.

Usage:
    subscription = store.observe(select_entity("todos", 2), print)
    ...
    subscription.dispose()  # observer never fires again
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from unistate.core.types import Observer, Selector

S = TypeVar("S")
R = TypeVar("R")

_UNSET: Any = object()


@dataclass(slots=True, eq=False)
class Subscription(Generic[S, R]):
    """One (selector, observer) pair registered on a Store.

    With ``distinct`` set, the observer is skipped when the selected value
    equals the value it received last time.
    """

    selector: Selector[S, R]
    observer: Observer[R]
    distinct: bool = False
    _on_dispose: Callable[[Subscription[S, R]], None] | None = field(default=None, repr=False)
    _last: Any = field(default=_UNSET, repr=False)
    _active: bool = field(default=True, repr=False)

    @property
    def active(self) -> bool:
        """False once dispose() has been called."""
        return self._active

    def notify(self, state: S) -> None:
        """Evaluate the selector against state and deliver the result."""
        if not self._active:
            return
        value = self.selector(state)
        if self.distinct and self._last is not _UNSET and value == self._last:
            return
        self.observer(value)
        # Only a delivery that returned counts as the last value seen
        self._last = value

    def dispose(self) -> None:
        """Unregister from the store. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        if self._on_dispose is not None:
            self._on_dispose(self)
            self._on_dispose = None
