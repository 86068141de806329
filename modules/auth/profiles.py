"""
Profile loading for a resolved role.
"""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from .exceptions import MalformedProfileError
from .interfaces import IBackendStore
from .models import PROFILE_MODELS, PROFILE_TABLES, Profile, Role


class ProfileLoader:
    """Fetches the profile row that belongs to a role."""

    def __init__(self, backend: IBackendStore):
        self._backend = backend

    async def load_profile(
        self,
        identity_id: str,
        role: Optional[Role],
    ) -> Optional[Profile]:
        """
        Load the role-tagged profile for an identity.

        An unresolved role returns None without touching the backend. A
        missing row also returns None: the row may not be visible yet even
        though role resolution just saw it.

        Raises:
            QueryError: If the lookup fails
            MalformedProfileError: If the row does not fit the role's model
        """
        if role is None:
            return None

        role = Role(role)
        row = await self._backend.table(PROFILE_TABLES[role]).select_one(
            {"id": identity_id}
        )
        if row is None:
            return None

        try:
            data = PROFILE_MODELS[role].model_validate(row)
        except PydanticValidationError as e:
            raise MalformedProfileError(identity_id, role.value) from e

        return Profile(role=role, data=data)
