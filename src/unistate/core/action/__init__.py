"""Action functionality: the generic entity action vocabulary."""

from unistate.core.action.models import AddEntity, EntityAction, RemoveEntity, UpdateEntity

__all__ = [
    "AddEntity",
    "UpdateEntity",
    "RemoveEntity",
    "EntityAction",
]
