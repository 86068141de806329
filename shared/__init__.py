"""
Shared infrastructure for the Hire My Hub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- backend: Backend store adapters (Supabase and in-memory)
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    create_anon_client,
    get_supabase_user_client,
)
from .exceptions import (
    HireHubError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    AuthProviderError,
    QueryError,
)
from .models import AuthSession, Identity

__all__ = [
    "Settings",
    "get_settings",
    "create_anon_client",
    "get_supabase_user_client",
    "HireHubError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthProviderError",
    "QueryError",
    "AuthSession",
    "Identity",
]
