"""
Supabase client initialization.

This module contains *only* the database connection setup. The client is built
from explicit settings and handed to the store that uses it; nothing here holds
a module-level client.
"""

from __future__ import annotations

# The dependency is `supabase` (supabase-py). If your editor can't resolve it,
# install it in your environment: `pip install supabase`.
from supabase import Client, create_client  # type: ignore[import-not-found]

from config.settings import Settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Create the official Supabase Python client for the configured project.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_KEY is not configured.
    """

    if not settings.supabase_url:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_URL. "
            "Set SUPABASE_URL to your Supabase project URL."
        )

    if not settings.supabase_key:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_KEY. "
            "Set SUPABASE_KEY to your Supabase API key."
        )

    return create_client(settings.supabase_url, settings.supabase_key)


__all__ = ["create_supabase_client"]
