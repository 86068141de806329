"""
Message repository for database access.
"""

from typing import Optional

from shared.repository import BaseRepository
from .models import Message


class MessageRepository(BaseRepository[Message]):
    """Repository for the ``messages`` table."""

    def list_for_party(self, user_id: str) -> list[Message]:
        """Messages the user sent or received, newest first."""
        result = self._execute(
            self._db.table("messages")
            .select("*")
            .or_(f"sender_id.eq.{user_id},receiver_id.eq.{user_id}")
            .order("created_at", desc=True),
            "messages",
        )
        return [Message.from_row(row) for row in result.data or []]

    def get_by_id(self, message_id: str) -> Optional[Message]:
        result = self._execute(
            self._db.table("messages").select("*").eq("id", message_id),
            "messages",
        )
        if not result.data:
            return None
        return Message.from_row(result.data[0])

    def mark_read(self, message_id: str) -> None:
        self._execute(
            self._db.table("messages").update({"is_read": True}).eq("id", message_id),
            "messages",
        )
