"""
Tests for `config/settings.py` and `repositories.create_store`.

Covers contract rules:
- DATA_SOURCE selects the store; unknown values are rejected.
- The Supabase client is only required when the live store is selected.
"""

import pytest

from config.settings import DATA_SOURCE_FIXTURES, Settings
from repositories import FixtureStore, create_store
from repositories.client import create_supabase_client


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("DATA_SOURCE", " Fixtures ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("FOLLOW_UP_AFTER_DAYS", "21")
    monkeypatch.delenv("SUPABASE_URL", raising=False)

    settings = Settings.from_env(env_path=None)

    assert settings.data_source == DATA_SOURCE_FIXTURES
    assert settings.log_level == "DEBUG"
    assert settings.follow_up_after_days == 21
    assert settings.supabase_url is None


def test_unknown_data_source_is_rejected() -> None:
    with pytest.raises(ValueError, match="DATA_SOURCE"):
        Settings(data_source="sqlite")


def test_negative_follow_up_is_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(follow_up_after_days=-1)


def test_fixture_store_needs_no_credentials() -> None:
    assert isinstance(create_store(Settings(data_source="fixtures")), FixtureStore)


def test_missing_supabase_url_names_the_variable() -> None:
    with pytest.raises(RuntimeError, match="SUPABASE_URL"):
        create_supabase_client(Settings(supabase_key="key"))


def test_missing_supabase_key_names_the_variable() -> None:
    with pytest.raises(RuntimeError, match="SUPABASE_KEY"):
        create_supabase_client(Settings(supabase_url="https://example.supabase.co"))
