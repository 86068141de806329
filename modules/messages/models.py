"""
Messages module data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field


class Message(BaseModel):
    """A row of ``messages``."""

    model_config = {"extra": "ignore"}

    id: str
    sender_id: str
    receiver_id: str
    application_id: Optional[str] = None
    subject: str = ""
    content: str = ""
    is_read: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Message":
        data = dict(row)
        for key in ("id", "sender_id", "receiver_id"):
            data[key] = str(data[key])
        if data.get("application_id") is not None:
            data["application_id"] = str(data["application_id"])
        return cls.model_validate(data)


class Inbox(BaseModel):
    """The caller's messages, split by direction, newest first."""

    received: list[Message] = Field(default_factory=list)
    sent: list[Message] = Field(default_factory=list)
    unread_count: int = 0
