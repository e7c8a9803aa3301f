"""Configuration module using Pydantic Settings.

Provides typed store configuration with environment variable support.

Usage:
    from unistate.config import StoreSettings

    settings = StoreSettings(reentrant_dispatch="error")
"""

from unistate.config.settings import StoreSettings

__all__ = [
    "StoreSettings",
]
