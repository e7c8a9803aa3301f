"""unistate: a unidirectional state container.

Usage:
    from dataclasses import dataclass, field, replace
    from unistate import AddEntity, Collection, Store, entity_reducer, on_field

    @dataclass(frozen=True, slots=True)
    class Todo:
        id: int
        task: str
        done: bool = False

    @dataclass(frozen=True, slots=True)
    class RootState:
        todos: Collection[Todo] = field(default_factory=Collection.empty)

    store = Store(RootState())
    store.register_reducer(on_field("todos", entity_reducer))
    store.observe(lambda s: len(s.todos), print)
    store.dispatch(AddEntity(Todo(1, "write docs")))  # prints 1
"""

__version__ = "0.1.0"

# Core primitives
from unistate.core import (
    AddEntity,
    Collection,
    DuplicateIdError,
    EntityAction,
    Identifiable,
    NotFoundError,
    Observer,
    Reducer,
    ReentrantDispatchError,
    RemoveEntity,
    Selector,
    UnistateError,
    UpdateEntity,
    combine_reducers,
    compose_reducers,
    create_selector,
    entity_reducer,
    identity_of,
    on_field,
    select_entity,
    select_field,
)

# Configuration
from unistate.config import StoreSettings

# Store
from unistate.store import Store, Subscription

__all__ = [
    # Version
    "__version__",
    # Core
    "Identifiable",
    "identity_of",
    "Collection",
    "AddEntity",
    "UpdateEntity",
    "RemoveEntity",
    "EntityAction",
    "Reducer",
    "Selector",
    "Observer",
    "entity_reducer",
    "compose_reducers",
    "combine_reducers",
    "on_field",
    "create_selector",
    "select_field",
    "select_entity",
    # Errors
    "UnistateError",
    "DuplicateIdError",
    "NotFoundError",
    "ReentrantDispatchError",
    # Store
    "Store",
    "Subscription",
    # Config
    "StoreSettings",
]
