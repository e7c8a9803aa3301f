"""Store and dispatch protocol.

Architecture Note:
    store/ is the stateful layer. It owns the current state value and is the
    only place that advances it; everything it calls into (reducers,
    selectors) lives in core/ and is pure.
"""

from unistate.store.store import Store
from unistate.store.subscription import Subscription

__all__ = [
    "Store",
    "Subscription",
]
