"""Collection functionality: persistent, identity-indexed ordered containers."""

from unistate.core.collection.models import Collection

__all__ = [
    "Collection",
]
