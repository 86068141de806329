"""
Role resolution.

A user's role is not stored anywhere; it is whichever of the three
profile tables holds a row for their identity id.
"""

import logging
from typing import Optional

from .interfaces import IBackendStore
from .models import PROFILE_TABLES, ROLE_PRIORITY, Role

logger = logging.getLogger(__name__)


class RoleResolver:
    """
    Resolves an identity to a role with ordered point lookups.

    Tables are queried one at a time in ROLE_PRIORITY order (admin,
    employer, user) and the first hit wins. An identity present in more
    than one table resolves to the highest-priority role.
    """

    def __init__(self, backend: IBackendStore):
        self._backend = backend

    async def resolve_role(self, identity_id: str) -> Optional[Role]:
        """
        Determine the role for an identity.

        Args:
            identity_id: Auth provider user ID

        Returns:
            The first matching role, or None if no profile table has a row
            (authenticated but not yet provisioned)

        Raises:
            QueryError: If any lookup fails. A failure is never read as
                "no row".
        """
        for role in ROLE_PRIORITY:
            row = await self._backend.table(PROFILE_TABLES[role]).select_one(
                {"id": identity_id},
                columns="id",
            )
            if row is not None:
                logger.debug("Resolved role %s for %s", role.value, identity_id)
                return role

        logger.debug("No profile row for %s", identity_id)
        return None
