"""
Persistence layer.

`create_store` picks the operations store named by the DATA_SOURCE setting.
"""

from __future__ import annotations

from config.settings import DATA_SOURCE_FIXTURES, Settings

from .fixture_store import FixtureStore
from .store import OperationsStore


def create_store(settings: Settings) -> OperationsStore:
    """
    Build the configured operations store.

    The Supabase client is only created (and its environment variables only
    required) when the live store is selected.
    """

    if settings.data_source == DATA_SOURCE_FIXTURES:
        return FixtureStore()

    from .client import create_supabase_client
    from .supabase_store import SupabaseStore

    return SupabaseStore(create_supabase_client(settings))


__all__ = ["FixtureStore", "OperationsStore", "create_store"]
