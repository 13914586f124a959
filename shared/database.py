"""
Database client factory for Supabase.

The backend talks to Supabase with the service role key; access control
is enforced in the service layer, not through RLS.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings


def create_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a Supabase client with the service role key.

    The caller owns the returned client. The API keeps exactly one, on its
    ServiceContainer, for the lifetime of the process.

    Args:
        settings: Settings to read the connection details from. Defaults
            to the cached application settings.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
