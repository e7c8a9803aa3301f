"""Configuration settings using Pydantic Settings.

Usage:
    from unistate.config import StoreSettings

    # Load from environment variables (UNISTATE_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(observer_errors="log")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Store dispatch behavior.

    Attributes:
        reentrant_dispatch: What a dispatch issued from inside a running
            dispatch cycle (by a reducer or observer) does.
            queue: run it after the current cycle, FIFO.
            error: raise ReentrantDispatchError.
        observer_errors: What an exception raised by an observer does.
            propagate: re-raise out of dispatch (state is already committed).
            log: log it with traceback and keep notifying the other observers.

    Environment Variables:
        UNISTATE_REENTRANT_DISPATCH
        UNISTATE_OBSERVER_ERRORS
    """

    model_config = SettingsConfigDict(
        env_prefix="UNISTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reentrant_dispatch: Literal["queue", "error"] = "queue"
    observer_errors: Literal["propagate", "log"] = "propagate"
