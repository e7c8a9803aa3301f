"""Selector functionality: plain and memoized projections of state."""

from unistate.core.selector.core import create_selector, select_entity, select_field

__all__ = [
    "create_selector",
    "select_field",
    "select_entity",
]
