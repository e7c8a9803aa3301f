"""Core type definitions for unistate."""

from collections.abc import Callable
from typing import Any

type Reducer[S, A] = Callable[[S, A], S]
"""Pure state transition: same (state, action) always yields the same state."""

type Selector[S, R] = Callable[[S], R]
"""Pure projection from state to a derived value."""

type Observer[R] = Callable[[R], Any]
"""Side-effecting callback receiving a selector result after each dispatch."""
