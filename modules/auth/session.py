"""
Session context.

Holds the current identity, role, profile and loading flag, and keeps
them in step with the auth provider:

    INITIALIZING --no session--> ANONYMOUS
    INITIALIZING --session-----> RESOLVING --> AUTHENTICATED
    any state --auth event, identity--> RESOLVING
    any state --auth event, none------> ANONYMOUS

Construct one instance per browser session (or per API request) and pass
it to consumers explicitly. Consumers read from it; only the context
itself mutates its fields.
"""

import asyncio
import logging
from typing import Any, Callable, Mapping, Optional

from shared.exceptions import HireHubError, QueryError
from shared.models import AuthSession, Identity

from .exceptions import ProfileInsertError
from .interfaces import IBackendStore, ISubscription
from .models import (
    PROFILE_TABLES,
    SIGN_UP_COLUMNS,
    Profile,
    Role,
    SessionSnapshot,
    SessionState,
)
from .profiles import ProfileLoader
from .roles import RoleResolver

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]


class SessionContext:
    """
    Single source of truth for who is signed in and as what.

    Every resolution attempt gets a generation number. When an attempt
    finishes, its result is applied only if no newer attempt (or sign-out)
    has started since, so a slow lookup can never overwrite fresher state.

    Usage:
        async with SessionContext(backend) as session:
            await session.sign_in(email, password)
            await session.wait_until_settled()
            if session.role is Role.EMPLOYER:
                ...
    """

    def __init__(
        self,
        backend: IBackendStore,
        resolver: Optional[RoleResolver] = None,
        loader: Optional[ProfileLoader] = None,
    ):
        self._backend = backend
        self._resolver = resolver or RoleResolver(backend)
        self._loader = loader or ProfileLoader(backend)

        self._identity: Optional[Identity] = None
        self._role: Optional[Role] = None
        self._profile: Optional[Profile] = None
        self._loading = True
        self._state = SessionState.INITIALIZING
        self._error: Optional[Exception] = None

        self._generation = 0
        self._settled = asyncio.Event()
        self._listeners: list[SessionListener] = []
        self._subscription: Optional[ISubscription] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._tasks: set[asyncio.Task] = set()

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def role(self) -> Optional[Role]:
        return self._role

    @property
    def profile(self) -> Optional[Profile]:
        return self._profile

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def error(self) -> Optional[Exception]:
        """The error from the most recent resolution, if it failed."""
        return self._error

    def snapshot(self) -> SessionSnapshot:
        """Immutable view of the current state."""
        return SessionSnapshot(
            state=self._state,
            identity=self._identity,
            role=self._role,
            profile=self._profile,
            loading=self._loading,
            error=str(self._error) if self._error is not None else None,
        )

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every transition.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SessionContext":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    async def start(self) -> None:
        """
        Subscribe to auth events and recover any existing session.

        Returns once the initial resolution has finished. Resolution
        failures are recorded on ``error`` rather than raised.
        """
        if self._subscription is not None:
            return

        self._loop = asyncio.get_running_loop()
        self._subscription = self._backend.auth.on_session_change(self._on_session_change)

        generation = self._generation
        try:
            session = await self._backend.auth.get_current_session()
        except HireHubError as e:
            if generation == self._generation:
                self._generation += 1
                self._error = e
                self._settle(SessionState.ANONYMOUS)
            return

        if generation != self._generation:
            # An auth event arrived during the lookup and owns the state now
            return

        identity = session.identity if session else None
        generation = self._begin(identity)
        if generation is not None:
            await self._resolve(identity, generation)

    def close(self) -> None:
        """Unsubscribe from auth events and drop in-flight resolutions."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._generation += 1
        for task in list(self._tasks):
            task.cancel()

    async def wait_until_settled(self, timeout: Optional[float] = None) -> None:
        """
        Wait until the context is no longer loading.

        Raises:
            asyncio.TimeoutError: If ``timeout`` seconds pass first
        """
        if timeout is None:
            await self._settled.wait()
        else:
            await asyncio.wait_for(self._settled.wait(), timeout)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def sign_in(self, email: str, password: str) -> None:
        """
        Check credentials with the auth provider.

        Session state does not change here; the provider's SIGNED_IN event
        drives the transition. Await ``wait_until_settled()`` to observe it.

        Raises:
            AuthProviderError: If the provider rejects the credentials
        """
        await self._backend.auth.sign_in_with_password(email, password)

    async def sign_up(
        self,
        email: str,
        password: str,
        role: Role,
        profile_data: Optional[Mapping[str, Any]] = None,
    ) -> Identity:
        """
        Create an identity and, for users and employers, its profile row.

        A failure reloading the new profile afterwards is not raised; it
        is recorded on ``error`` like any other resolution failure.

        Args:
            email: Sign-up email, also stored on the profile row
            password: Sign-up password
            role: Requested role; only USER and EMPLOYER get a profile row
            profile_data: Form data for the profile columns

        Returns:
            The new identity

        Raises:
            AuthProviderError: If the provider rejects the sign-up
            ProfileInsertError: If the identity was created but its profile
                row could not be inserted
        """
        role = Role(role)
        identity = await self._backend.auth.sign_up(email, password)

        columns = SIGN_UP_COLUMNS.get(role)
        if columns is None:
            return identity

        data = profile_data or {}
        row = {"id": identity.id, "email": email}
        row.update({column: data.get(column) for column in columns})

        table = PROFILE_TABLES[role]
        try:
            await self._backend.table(table).insert(row)
        except QueryError as e:
            raise ProfileInsertError(identity.id, table, e.message) from e

        # The provider may have signed the new identity in before the row existed
        if self._identity is not None and self._identity.id == identity.id:
            try:
                await self.refresh_profile()
            except HireHubError as e:
                # Account and row exist; the failed read is recorded on ``error``
                logger.warning("Profile reload after sign-up failed for %s: %s", identity.id, e)

        return identity

    async def sign_out(self) -> None:
        """
        Sign out with the auth provider.

        The provider's SIGNED_OUT event moves the context to ANONYMOUS.

        Raises:
            AuthProviderError: If the provider rejects the request
        """
        await self._backend.auth.sign_out()

    async def refresh_profile(self) -> None:
        """
        Re-resolve role and profile for the current identity.

        Call after writing profile data so the session reflects it.
        Does nothing when signed out.

        Raises:
            QueryError: If a lookup fails (also recorded on ``error``)
        """
        identity = self._identity
        if identity is None:
            return

        generation = self._begin(identity)
        error = await self._resolve(identity, generation)
        if error is not None:
            raise error

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _on_session_change(self, event: str, session: Optional[AuthSession]) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if self._loop is not None and running is not self._loop:
            # Delivered from the SDK's refresh thread
            self._loop.call_soon_threadsafe(self._on_session_change, event, session)
            return

        logger.debug("Auth event %s", event)
        identity = session.identity if session else None
        generation = self._begin(identity)
        if generation is not None:
            task = running.create_task(self._resolve(identity, generation))
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            # Nobody awaits event-driven resolutions; the error is already on ``error``
            logger.error("Session resolution failed: %r", error, exc_info=error)

    def _begin(self, identity: Optional[Identity]) -> Optional[int]:
        """
        Start a new generation for ``identity``.

        Returns:
            The generation to resolve under, or None for a sign-out
        """
        self._generation += 1
        self._error = None

        if identity is None:
            self._identity = None
            self._role = None
            self._profile = None
            self._settle(SessionState.ANONYMOUS)
            return None

        if self._identity is None or self._identity.id != identity.id:
            self._role = None
            self._profile = None

        self._identity = identity
        self._loading = True
        self._state = SessionState.RESOLVING
        self._settled.clear()
        self._notify()
        return self._generation

    async def _resolve(
        self,
        identity: Identity,
        generation: int,
    ) -> Optional[HireHubError]:
        """
        Run role resolution and profile loading for one generation.

        Returns:
            The error this generation failed with, or None
        """
        try:
            role = await self._resolver.resolve_role(identity.id)
            profile = await self._loader.load_profile(identity.id, role)
        except HireHubError as e:
            if generation != self._generation:
                return None
            self._role = None
            self._profile = None
            self._error = e
            self._settle(SessionState.AUTHENTICATED)
            return e
        except Exception as e:
            if generation != self._generation:
                logger.debug("Discarding stale resolution failure for %s: %r", identity.id, e)
                return None
            self._role = None
            self._profile = None
            self._error = e
            self._settle(SessionState.AUTHENTICATED)
            raise

        if generation != self._generation:
            logger.debug("Discarding stale resolution for %s", identity.id)
            return None

        self._role = role
        self._profile = profile
        self._settle(SessionState.AUTHENTICATED)
        return None

    def _settle(self, state: SessionState) -> None:
        self._loading = False
        self._state = state
        self._settled.set()
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
