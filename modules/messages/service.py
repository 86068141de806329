"""
Messages service implementation.
"""

from modules.auth.guards import require_identity
from modules.auth.session import SessionContext

from .exceptions import MessageAccessDeniedError, MessageNotFoundError
from .interfaces import IMessageService
from .models import Inbox, Message
from .repository import MessageRepository


class MessageService(IMessageService):
    """Message operations for the caller described by a session context."""

    def __init__(self, messages: MessageRepository, session: SessionContext):
        self._messages = messages
        self._session = session

    async def inbox(self) -> Inbox:
        identity = require_identity(self._session)
        messages = self._messages.list_for_party(identity.id)

        received = [m for m in messages if m.receiver_id == identity.id]
        sent = [m for m in messages if m.sender_id == identity.id]
        return Inbox(
            received=received,
            sent=sent,
            unread_count=sum(1 for m in received if not m.is_read),
        )

    async def open_message(self, message_id: str) -> Message:
        identity = require_identity(self._session)

        message = self._messages.get_by_id(message_id)
        if message is None:
            raise MessageNotFoundError(message_id)
        if identity.id not in (message.sender_id, message.receiver_id):
            raise MessageAccessDeniedError(message_id, identity.id)

        if message.receiver_id == identity.id and not message.is_read:
            self._messages.mark_read(message_id)
            message = message.model_copy(update={"is_read": True})
        return message
