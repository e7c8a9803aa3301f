"""Core functionalities: stateless, pure primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: the persistent Collection,
    the entity action vocabulary, reducers and selectors. None of them hold
    runtime state. For the stateful dispatch loop, see store/.
"""

from unistate.core.action import AddEntity, EntityAction, RemoveEntity, UpdateEntity
from unistate.core.collection import Collection
from unistate.core.errors import (
    DuplicateIdError,
    NotFoundError,
    ReentrantDispatchError,
    UnistateError,
)
from unistate.core.identity import Identifiable, identity_of
from unistate.core.reducer import combine_reducers, compose_reducers, entity_reducer, on_field
from unistate.core.selector import create_selector, select_entity, select_field
from unistate.core.types import Observer, Reducer, Selector

__all__ = [
    # Types
    "Reducer",
    "Selector",
    "Observer",
    # Identity
    "Identifiable",
    "identity_of",
    # Collection
    "Collection",
    # Actions
    "AddEntity",
    "UpdateEntity",
    "RemoveEntity",
    "EntityAction",
    # Reducers
    "entity_reducer",
    "compose_reducers",
    "combine_reducers",
    "on_field",
    # Selectors
    "create_selector",
    "select_field",
    "select_entity",
    # Errors
    "UnistateError",
    "DuplicateIdError",
    "NotFoundError",
    "ReentrantDispatchError",
]
