"""
Database client factory for Supabase.

Provides the service-role client used by every repository. The backend
performs its own authorization (see api.middleware.auth), so all queries
run with the service role and bypass RLS.
"""

from typing import Optional
from supabase import create_client, Client, ClientOptions

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The PostgREST client is created with an explicit timeout so a slow
    database surfaces as an UpstreamTimeoutError instead of a hung request.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(
                postgrest_client_timeout=settings.db_timeout_seconds,
            ),
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
