"""
Backend store adapters.

The auth core talks to the backend through a narrow contract: an ``auth``
provider (session lookup, session-change subscription, password sign-in,
sign-up, sign-out) and ``table(name)`` handles with point lookups and
inserts. Two implementations live here:

- SupabaseBackend: wraps a Supabase client and translates SDK errors into
  AuthProviderError / QueryError.
- InMemoryBackend: dict-backed store for testing and local development.
"""

import uuid
from typing import Any, Callable, Mapping, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AuthError as SupabaseAuthError, Client

from .exceptions import AuthProviderError, QueryError
from .models import AuthSession, Identity


SessionChangeCallback = Callable[[str, Optional[AuthSession]], None]


class Subscription:
    """Handle returned by ``on_session_change``."""

    def __init__(self, cancel: Callable[[], None]):
        self._cancel = cancel
        self._active = True

    def unsubscribe(self) -> None:
        if self._active:
            self._active = False
            self._cancel()


# ---------------------------------------------------------------------------
# Supabase
# ---------------------------------------------------------------------------


def _to_auth_session(session: Any) -> Optional[AuthSession]:
    """Map a Supabase Auth session to our AuthSession model."""
    if session is None or session.user is None:
        return None
    return AuthSession(
        identity=Identity(id=str(session.user.id), email=session.user.email or ""),
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
    )


class SupabaseAuthProvider:
    """Auth provider backed by Supabase Auth."""

    def __init__(self, client: Client):
        self._auth = client.auth

    async def get_current_session(self) -> Optional[AuthSession]:
        try:
            session = self._auth.get_session()
        except SupabaseAuthError as e:
            raise AuthProviderError(str(e)) from e
        return _to_auth_session(session)

    def on_session_change(self, callback: SessionChangeCallback) -> Subscription:
        def forward(event: str, session: Any) -> None:
            callback(event, _to_auth_session(session))

        subscription = self._auth.on_auth_state_change(forward)
        return Subscription(subscription.unsubscribe)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        try:
            response = self._auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except SupabaseAuthError as e:
            raise AuthProviderError(str(e)) from e

        session = _to_auth_session(response.session)
        if session is None:
            raise AuthProviderError("Sign-in did not establish a session")
        return session

    async def sign_up(self, email: str, password: str) -> Identity:
        try:
            response = self._auth.sign_up({"email": email, "password": password})
        except SupabaseAuthError as e:
            raise AuthProviderError(str(e)) from e

        if response.user is None:
            raise AuthProviderError("Failed to create user")
        return Identity(id=str(response.user.id), email=response.user.email or email)

    async def sign_out(self) -> None:
        try:
            self._auth.sign_out()
        except SupabaseAuthError as e:
            raise AuthProviderError(str(e)) from e


class SupabaseTable:
    """Point lookups and inserts against one Supabase table."""

    def __init__(self, client: Client, name: str):
        self._client = client
        self.name = name

    async def select_one(
        self,
        filters: Mapping[str, Any],
        columns: str = "*",
    ) -> Optional[dict[str, Any]]:
        query = self._client.table(self.name).select(columns)
        for column, value in filters.items():
            query = query.eq(column, value)

        try:
            result = query.limit(1).execute()
        except APIError as e:
            raise QueryError(e.message or str(e), table=self.name, code=e.code) from e
        except httpx.HTTPError as e:
            raise QueryError(str(e), table=self.name) from e

        if not result.data:
            return None
        return result.data[0]

    async def insert(self, row: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        try:
            result = self._client.table(self.name).insert(dict(row)).execute()
        except APIError as e:
            raise QueryError(e.message or str(e), table=self.name, code=e.code) from e
        except httpx.HTTPError as e:
            raise QueryError(str(e), table=self.name) from e

        if not result.data:
            return None
        return result.data[0]


class SupabaseBackend:
    """Backend store over a Supabase client."""

    def __init__(self, client: Client):
        self._client = client
        self._auth = SupabaseAuthProvider(client)

    @property
    def auth(self) -> SupabaseAuthProvider:
        return self._auth

    @property
    def client(self) -> Client:
        return self._client

    def table(self, name: str) -> SupabaseTable:
        return SupabaseTable(self._client, name)


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------


class InMemoryAuthProvider:
    """
    Auth provider with in-memory accounts.

    Mirrors Supabase with email confirmation disabled: sign-up and sign-in
    both establish a session and notify subscribers synchronously.
    """

    def __init__(self, sign_in_on_sign_up: bool = True):
        self._accounts: dict[str, tuple[Identity, str]] = {}
        self._session: Optional[AuthSession] = None
        self._callbacks: list[SessionChangeCallback] = []
        self._sign_in_on_sign_up = sign_in_on_sign_up

    def add_account(
        self,
        email: str,
        password: str,
        identity_id: Optional[str] = None,
    ) -> Identity:
        """Register an account directly, without emitting any event."""
        identity = Identity(id=identity_id or str(uuid.uuid4()), email=email)
        self._accounts[email.lower()] = (identity, password)
        return identity

    def set_session(self, identity: Optional[Identity]) -> Optional[AuthSession]:
        """Replace the current session without emitting any event."""
        self._session = self._new_session(identity) if identity else None
        return self._session

    def emit(self, event: str, session: Optional[AuthSession]) -> None:
        """Deliver an auth event to every subscriber, in subscription order."""
        for callback in list(self._callbacks):
            callback(event, session)

    def _new_session(self, identity: Identity) -> AuthSession:
        return AuthSession(
            identity=identity,
            access_token=f"access-{uuid.uuid4().hex}",
            refresh_token=f"refresh-{uuid.uuid4().hex}",
        )

    async def get_current_session(self) -> Optional[AuthSession]:
        return self._session

    def on_session_change(self, callback: SessionChangeCallback) -> Subscription:
        self._callbacks.append(callback)
        return Subscription(lambda: self._callbacks.remove(callback))

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        account = self._accounts.get(email.lower())
        if account is None or account[1] != password:
            raise AuthProviderError("Invalid login credentials")

        self._session = self._new_session(account[0])
        self.emit("SIGNED_IN", self._session)
        return self._session

    async def sign_up(self, email: str, password: str) -> Identity:
        if email.lower() in self._accounts:
            raise AuthProviderError("User already registered")

        identity = self.add_account(email, password)
        if self._sign_in_on_sign_up:
            self._session = self._new_session(identity)
            self.emit("SIGNED_IN", self._session)
        return identity

    async def sign_out(self) -> None:
        self._session = None
        self.emit("SIGNED_OUT", None)


class InMemoryTable:
    """A list of rows with a primary-key uniqueness check."""

    def __init__(self, name: str, query_log: list[tuple[str, str]]):
        self.name = name
        self.rows: list[dict[str, Any]] = []
        self._query_log = query_log

    async def select_one(
        self,
        filters: Mapping[str, Any],
        columns: str = "*",
    ) -> Optional[dict[str, Any]]:
        self._query_log.append((self.name, "select"))
        for row in self.rows:
            if all(row.get(column) == value for column, value in filters.items()):
                if columns == "*":
                    return dict(row)
                wanted = [c.strip() for c in columns.split(",")]
                return {c: row.get(c) for c in wanted}
        return None

    async def insert(self, row: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        self._query_log.append((self.name, "insert"))
        if "id" in row and any(r.get("id") == row["id"] for r in self.rows):
            raise QueryError(
                f'duplicate key value violates unique constraint "{self.name}_pkey"',
                table=self.name,
                code="23505",
            )
        stored = dict(row)
        self.rows.append(stored)
        return dict(stored)


class InMemoryBackend:
    """
    Backend store with in-memory storage.

    For testing and development. Use SupabaseBackend for production.
    """

    def __init__(self, sign_in_on_sign_up: bool = True):
        self._auth = InMemoryAuthProvider(sign_in_on_sign_up=sign_in_on_sign_up)
        self._tables: dict[str, InMemoryTable] = {}
        # (table, operation) in call order
        self.query_log: list[tuple[str, str]] = []

    @property
    def auth(self) -> InMemoryAuthProvider:
        return self._auth

    def table(self, name: str) -> InMemoryTable:
        if name not in self._tables:
            self._tables[name] = InMemoryTable(name, self.query_log)
        return self._tables[name]

    def seed(self, name: str, *rows: Mapping[str, Any]) -> None:
        """Insert rows directly, bypassing the query log."""
        self.table(name).rows.extend(dict(r) for r in rows)
