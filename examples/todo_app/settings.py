"""Todo app settings: store behavior plus driver-only options."""

from __future__ import annotations

from unistate import StoreSettings


class TodoAppSettings(StoreSettings):
    """StoreSettings plus the log level the driver configures logging with.

    Environment Variables:
        UNISTATE_LOG_LEVEL
    """

    log_level: str = "WARNING"
