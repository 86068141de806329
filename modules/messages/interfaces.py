"""
Messages module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Inbox, Message


@runtime_checkable
class IMessageService(Protocol):
    """Interface for reading messages. Available to every role."""

    async def inbox(self) -> Inbox:
        ...

    async def open_message(self, message_id: str) -> Message:
        """
        Return a message the caller is party to.

        Opening an unread message as its receiver marks it read.

        Raises:
            MessageNotFoundError: If the message does not exist
            MessageAccessDeniedError: If the caller is not a party
        """
        ...
