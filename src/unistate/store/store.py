"""Store: single source of truth updated only through dispatched actions.

Usage:
    store = Store(RootState())
    store.register_reducer(todo_reducer).register_reducer(history_reducer)

    store.observe(select_entity("todos", 2), lambda todo: print(todo))

    store.dispatch(TodoEntity(AddEntity(Todo(2, "ship"))))
    store.get_state().todos.ids  # (2,)
    store.select(select_field("todos"))
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterable
from typing import Generic, Self, TypeVar

from unistate.config import StoreSettings
from unistate.core.errors import ReentrantDispatchError
from unistate.core.reducer.core import apply_reducers
from unistate.core.types import Observer, Reducer, Selector
from unistate.store.subscription import Subscription

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")
R = TypeVar("R")


class Store(Generic[S, A]):
    """Holds the current state, the reducer chain and the subscriptions.

    A dispatch cycle folds the action through every reducer in registration
    order, commits the result, then notifies every subscription in
    registration order. A reducer failure propagates out of dispatch and
    leaves the committed state and the observers untouched.

    Dispatch is serialized by a lock. Dispatching from inside a running cycle
    (from a reducer or observer) is governed by
    ``StoreSettings.reentrant_dispatch``: queued for after the current cycle
    (FIFO), or rejected with ReentrantDispatchError.

    Args:
        initial_state: State before the first dispatch. Treated as an
            immutable value.
        reducers: Initial reducer chain.
        settings: Dispatch behavior. Read from the environment when omitted.
    """

    def __init__(
        self,
        initial_state: S,
        *,
        reducers: Iterable[Reducer[S, A]] = (),
        settings: StoreSettings | None = None,
    ):
        self._state = initial_state
        self._reducers: list[Reducer[S, A]] = list(reducers)
        self._subscriptions: list[Subscription[S, object]] = []
        self._settings = settings or StoreSettings()
        self._lock = threading.RLock()
        self._dispatching = False
        self._pending: deque[A] = deque()
        self._dispatch_count = 0

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def state(self) -> S:
        """Current committed state (read-only)."""
        return self._state

    @property
    def dispatch_count(self) -> int:
        """Number of dispatch cycles committed so far."""
        return self._dispatch_count

    def get_state(self) -> S:
        """Return the current committed state."""
        return self._state

    def register_reducer(self, reducer: Reducer[S, A]) -> Self:
        """Append reducer to the chain. Returns the store for chaining."""
        self._reducers.append(reducer)
        return self

    def register_reducers(self, *reducers: Reducer[S, A]) -> Self:
        """Append several reducers, in order."""
        for reducer in reducers:
            self.register_reducer(reducer)
        return self

    def select(self, selector: Selector[S, R]) -> R:
        """Evaluate selector against the current state without registering it."""
        return selector(self._state)

    def observe(
        self,
        selector: Selector[S, R],
        observer: Observer[R],
        *,
        distinct: bool = False,
    ) -> Subscription[S, R]:
        """Register a selector/observer pair, fired after each later dispatch.

        Does not fire for dispatches that already happened.

        Args:
            selector: Projection evaluated against each new state.
            observer: Callback receiving the projection.
            distinct: Only fire when the projection changed since last delivery.

        Returns:
            Subscription handle; call dispose() to unregister.
        """
        subscription: Subscription[S, R] = Subscription(
            selector=selector,
            observer=observer,
            distinct=distinct,
            _on_dispose=self._unsubscribe,
        )
        self._subscriptions.append(subscription)  # type: ignore[arg-type]
        return subscription

    def _unsubscribe(self, subscription: Subscription[S, R]) -> None:
        self._subscriptions.remove(subscription)  # type: ignore[arg-type]

    def dispatch(self, action: A) -> None:
        """Run a dispatch cycle for action.

        Raises:
            ReentrantDispatchError: Called from inside a running cycle while
                ``reentrant_dispatch`` is "error".
            Exception: Whatever a reducer raises (state unchanged, no observer
                fired), or an observer raises under ``observer_errors="propagate"``
                (state already committed).
        """
        with self._lock:
            if self._dispatching:
                if self._settings.reentrant_dispatch == "error":
                    raise ReentrantDispatchError(
                        f"dispatch({type(action).__name__}) called during a dispatch cycle"
                    )
                logger.debug("Queueing nested dispatch of %s", type(action).__name__)
                self._pending.append(action)
                return

            self._dispatching = True
            try:
                self._run_cycle(action)
                while self._pending:
                    self._run_cycle(self._pending.popleft())
            except Exception:
                if self._pending:
                    logger.warning(
                        "Dispatch cycle failed, dropping %d queued action(s)", len(self._pending)
                    )
                    self._pending.clear()
                raise
            finally:
                self._dispatching = False

    def _run_cycle(self, action: A) -> None:
        reducers = tuple(self._reducers)
        logger.debug(
            "Dispatching %s through %d reducer(s) to %d subscription(s)",
            type(action).__name__,
            len(reducers),
            len(self._subscriptions),
        )
        # Fold into a local value; commit only once every reducer succeeded
        new_state = apply_reducers(reducers, self._state, action)
        self._state = new_state
        self._dispatch_count += 1
        self._notify(new_state)

    def _notify(self, state: S) -> None:
        for subscription in tuple(self._subscriptions):
            if self._settings.observer_errors == "propagate":
                subscription.notify(state)
                continue
            try:
                subscription.notify(state)
            except Exception:
                logger.exception("Observer %r failed", subscription.observer)

    def __repr__(self) -> str:
        return (
            f"Store(reducers={len(self._reducers)}, "
            f"subscriptions={len(self._subscriptions)}, state={self._state!r})"
        )
