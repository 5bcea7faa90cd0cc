"""
Farkle - Supabase Client

Singleton factory for the Supabase client used to store saved games.
"""

from functools import lru_cache

from supabase import Client, create_client

from farkle.config.settings import get_settings


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Create and cache a Supabase client instance."""
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set to use saved games.")
    return create_client(settings.supabase_url, settings.supabase_anon_key)
