"""
Message API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_message_service

from .interfaces import IMessageService
from .models import Inbox, Message

router = APIRouter()


@router.get("", response_model=Inbox)
async def get_inbox(service: IMessageService = Depends(get_message_service)) -> Inbox:
    return await service.inbox()


@router.get("/{message_id}", response_model=Message)
async def open_message(
    message_id: str,
    service: IMessageService = Depends(get_message_service),
) -> Message:
    """Return a message, marking it read if the caller received it."""
    return await service.open_message(message_id)
