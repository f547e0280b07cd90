# app/core/supabase_client.py
from functools import lru_cache
from supabase import create_client, Client

from app.core.config import get_settings

settings = get_settings()


@lru_cache
def supabase_public() -> Client:
    """
    Create a Supabase client with the anon/public key.

    Note: This client still respects RLS, so dashboard tables
    (orders, users, ...) are usually not readable through it.
    """
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


@lru_cache
def supabase_admin() -> Client:
    """
    Create a Supabase client with the service role key.

    Use cases:
      - dashboard counts and aggregates across all users
      - calling the analytics RPC functions
      - updating order status

    WARNING:
      - Never expose service role key to frontend.
      - Only backend should call this.

    Raises:
        RuntimeError: if SUPABASE_SERVICE_ROLE_KEY is not set.
    """
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("Missing SUPABASE_SERVICE_ROLE_KEY in .env")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)


def get_supabase() -> Client:
    """
    FastAPI dependency that returns the shared client.

    Prefers the service role client. Without a service role key it falls
    back to the anon client, so RLS policies decide what the dashboard
    can read.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(client: Client = Depends(get_supabase)):
            ...
    """
    if settings.SUPABASE_SERVICE_ROLE_KEY:
        return supabase_admin()
    return supabase_public()
