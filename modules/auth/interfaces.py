"""
Authentication module interfaces.

The auth core depends on the backend store only through these protocols.
shared.backend provides the Supabase implementation and an in-memory one
for tests; anything else with the same shape works too.
"""

from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from shared.models import AuthSession, Identity


SessionChangeCallback = Callable[[str, Optional[AuthSession]], None]


@runtime_checkable
class ISubscription(Protocol):
    """Handle for an auth-state subscription."""

    def unsubscribe(self) -> None:
        ...


@runtime_checkable
class IAuthProvider(Protocol):
    """
    Interface for the auth provider.

    Implementations raise AuthProviderError when the provider rejects
    a request.
    """

    async def get_current_session(self) -> Optional[AuthSession]:
        """Return the session the provider currently holds, if any."""
        ...

    def on_session_change(self, callback: SessionChangeCallback) -> ISubscription:
        """
        Subscribe to auth state changes.

        The callback receives ``(event_kind, session_or_none)`` for every
        sign-in, sign-out, token refresh and expiry, in delivery order.
        """
        ...

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        ...

    async def sign_up(self, email: str, password: str) -> Identity:
        ...

    async def sign_out(self) -> None:
        ...


@runtime_checkable
class ITable(Protocol):
    """
    Interface for a single table.

    Implementations raise QueryError on backend or network failure;
    a missing row is ``None``, never an error.
    """

    async def select_one(
        self,
        filters: Mapping[str, Any],
        columns: str = "*",
    ) -> Optional[dict[str, Any]]:
        ...

    async def insert(self, row: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        ...


@runtime_checkable
class IBackendStore(Protocol):
    """Auth provider plus named tables."""

    @property
    def auth(self) -> IAuthProvider:
        ...

    def table(self, name: str) -> ITable:
        ...
