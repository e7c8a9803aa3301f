"""Entity identity functionality: the capability collections index by."""

from unistate.core.identity.models import (
    Identifiable,
    identity_of,
    is_entity_id,
    require_entity_id,
)

__all__ = [
    "Identifiable",
    "identity_of",
    "is_entity_id",
    "require_entity_id",
]
