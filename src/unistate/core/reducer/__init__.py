"""Reducer functionality: entity reducer and reducer composition."""

from unistate.core.reducer.core import (
    combine_reducers,
    compose_reducers,
    entity_reducer,
    on_field,
)

__all__ = [
    "entity_reducer",
    "compose_reducers",
    "combine_reducers",
    "on_field",
]
