from functools import lru_cache

from scoutquest.core.config import get_settings
from supabase import Client, create_client


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Get the shared Supabase client.

    Uses SUPABASE_URL and SUPABASE_KEY from the settings. The key should be
    the service role key: row-level security is bypassed and access control
    happens in the API.
    """
    settings = get_settings()
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def get_db() -> Client:
    """FastAPI dependency returning the Supabase client."""
    return get_supabase_client()


def get_auth_client() -> Client:
    """
    FastAPI dependency returning a fresh client for sign in / sign up.

    Signing in stores the user's session on the client, so those calls must
    not share the service-role client used for data access.
    """
    settings = get_settings()
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
