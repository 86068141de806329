"""
Messages module.

Read-only inbox shared by all roles, with read tracking.
"""

from .interfaces import IMessageService
from .models import Inbox, Message
from .exceptions import MessageAccessDeniedError, MessageNotFoundError

__all__ = [
    "IMessageService",
    "Inbox",
    "Message",
    "MessageAccessDeniedError",
    "MessageNotFoundError",
]
