"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from unistate import Store, StoreSettings


@pytest.fixture
def settings():
    """Default settings, independent of UNISTATE_* in the environment."""
    return StoreSettings(_env_file=None, reentrant_dispatch="queue", observer_errors="propagate")


@pytest.fixture
def make_store(settings):
    """Factory building a Store with the default test settings."""

    def factory(initial_state, *reducers, **overrides):
        store_settings = settings.model_copy(update=overrides) if overrides else settings
        return Store(initial_state, reducers=reducers, settings=store_settings)

    return factory
