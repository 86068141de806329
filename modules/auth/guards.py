"""
Role guards for feature services.

Services read the session; they never mutate it. A guard either returns
what the caller needs or raises the error the API should report.
"""

from shared.models import Identity

from .exceptions import InsufficientPermissionsError, NotSignedInError
from .models import Profile, Role
from .session import SessionContext


def require_identity(session: SessionContext) -> Identity:
    """
    Return the signed-in identity.

    Raises:
        The recorded resolution error, if the last resolution failed
        NotSignedInError: If nobody is signed in
    """
    if session.error is not None:
        raise session.error
    if session.identity is None:
        raise NotSignedInError()
    return session.identity


def require_role(session: SessionContext, *roles: Role) -> Profile:
    """
    Return the caller's profile if their role is one of ``roles``.

    A resolved role without a visible profile row is treated as
    not provisioned.

    Raises:
        The recorded resolution error, if the last resolution failed
        NotSignedInError: If nobody is signed in
        InsufficientPermissionsError: If the role does not match
    """
    require_identity(session)

    required = "|".join(r.value for r in roles)
    if session.role is None or session.role not in roles:
        held = session.role.value if session.role else "none"
        raise InsufficientPermissionsError(required_role=required, user_role=held)
    if session.profile is None:
        raise InsufficientPermissionsError(required_role=required, user_role="none")
    return session.profile
