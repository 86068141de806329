"""
Profile repository for database access.
"""

from typing import Any

from shared.repository import BaseRepository


class ProfileRepository(BaseRepository[dict]):
    """Writes to the role profile tables."""

    def update(self, table: str, identity_id: str, data: dict[str, Any]) -> bool:
        """
        Update one profile row and stamp ``updated_at``.

        Returns:
            False if no row matched
        """
        row = {**data, "updated_at": self._now()}
        result = self._execute(
            self._db.table(table).update(row).eq("id", identity_id),
            table,
        )
        return bool(result.data)
