"""
Authentication module.

Resolves a signed-in identity to a role and profile, and keeps that
answer current as the auth provider reports sign-ins, sign-outs and
token refreshes.

Public API:
- SessionContext: the single source of truth for identity, role, profile
- RoleResolver / ProfileLoader: the lookups SessionContext runs
- require_identity / require_role: guards for feature services
- TokenValidator: Supabase access token validation
- Auth exceptions: NotSignedInError, InsufficientPermissionsError, etc.
"""

from .interfaces import IAuthProvider, IBackendStore, ISubscription, ITable
from .models import (
    PROFILE_TABLES,
    ROLE_PRIORITY,
    AdminProfile,
    EmployerProfile,
    Profile,
    Role,
    SessionSnapshot,
    SessionState,
    UserProfile,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    NotSignedInError,
    InsufficientPermissionsError,
    ProfileInsertError,
    MalformedProfileError,
)
from .roles import RoleResolver
from .profiles import ProfileLoader
from .session import SessionContext
from .guards import require_identity, require_role
from .tokens import TokenValidator, get_token_validator, reset_token_validator

__all__ = [
    # Interfaces
    "IAuthProvider",
    "IBackendStore",
    "ISubscription",
    "ITable",
    # Models
    "PROFILE_TABLES",
    "ROLE_PRIORITY",
    "AdminProfile",
    "EmployerProfile",
    "Profile",
    "Role",
    "SessionSnapshot",
    "SessionState",
    "UserProfile",
    # Core
    "RoleResolver",
    "ProfileLoader",
    "SessionContext",
    "require_identity",
    "require_role",
    "TokenValidator",
    "get_token_validator",
    "reset_token_validator",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "NotSignedInError",
    "InsufficientPermissionsError",
    "ProfileInsertError",
    "MalformedProfileError",
]
