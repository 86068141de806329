"""
Profiles service implementation.
"""

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from modules.auth.guards import require_role
from modules.auth.models import PROFILE_TABLES, Profile, Role
from modules.auth.session import SessionContext

from .exceptions import InvalidProfileUpdateError, ProfileNotFoundError
from .models import UPDATE_MODELS
from .repository import ProfileRepository


class ProfileService:
    """Edits the caller's own profile and keeps the session in step."""

    def __init__(self, profiles: ProfileRepository, session: SessionContext):
        self._profiles = profiles
        self._session = session

    async def update_my_profile(self, data: Mapping[str, Any]) -> Profile:
        """
        Validate and save profile fields for the signed-in user or employer.

        The session is refreshed afterwards so every consumer sees the
        new values.

        Raises:
            InsufficientPermissionsError: For administrators
            InvalidProfileUpdateError: If a field is invalid
            ProfileNotFoundError: If the profile row is gone
        """
        profile = require_role(self._session, Role.USER, Role.EMPLOYER)

        try:
            update = UPDATE_MODELS[profile.role].model_validate(dict(data))
        except PydanticValidationError as e:
            raise InvalidProfileUpdateError(
                e.errors(include_url=False, include_context=False)
            ) from e

        changes = update.model_dump(mode="json", exclude_unset=True)
        if changes:
            table = PROFILE_TABLES[profile.role]
            if not self._profiles.update(table, profile.id, changes):
                raise ProfileNotFoundError(profile.id)

        await self._session.refresh_profile()
        if self._session.profile is None:
            raise ProfileNotFoundError(profile.id)
        return self._session.profile
