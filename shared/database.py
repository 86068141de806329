"""
Database client factory for Supabase.

Every client here uses the anon key: anon clients for sign-in and
sign-up, and user-authenticated clients for everything else, so that
Row Level Security decides what each caller can read and write.
"""

from supabase import AuthError as SupabaseAuthError, Client, create_client
from supabase.lib.client_options import ClientOptions

from .config import get_settings
from .exceptions import AuthProviderError


def _request_options() -> ClientOptions:
    """Options for short-lived clients that live for a single request."""
    return ClientOptions(auto_refresh_token=False, persist_session=False)


def create_anon_client() -> Client:
    """
    Create a fresh Supabase client with the anon key and no session.

    Each call returns a new client so that a sign-in performed on it
    stays private to the caller.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_ANON_KEY is not set
    """
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=_request_options(),
    )


def get_supabase_user_client(access_token: str) -> Client:
    """
    Get Supabase client authenticated as a specific user.

    Use this for operations that should respect Row Level Security (RLS),
    such as querying data that belongs to the authenticated user.

    Args:
        access_token: JWT access token from Supabase Auth

    Returns:
        Supabase client configured with user's access token

    Raises:
        AuthProviderError: If Supabase Auth rejects the token
    """
    client = create_anon_client()
    # refresh_token can be empty for backend use
    try:
        client.auth.set_session(access_token, "")
    except SupabaseAuthError as e:
        raise AuthProviderError(str(e)) from e
    return client
