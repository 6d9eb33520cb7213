"""
Contact form and inbox endpoints.

Visitors post messages through ``router``; administrators read them
through ``admin_router`` (mounted at ``/api/admin/messages``) and flag
them as read.
"""

from typing import Dict, List, Union

from fastapi import APIRouter, Depends, status

from ...core.errors import NotFoundError
from ...schemas.contact import ContactMessageCreate, ContactMessageRead
from ...services.message_service import MessageService
from ..deps import get_message_service

router = APIRouter()
admin_router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    message_in: ContactMessageCreate,
    service: MessageService = Depends(get_message_service),
) -> Dict[str, Union[bool, str]]:
    """Store a contact form submission.  New messages start unread."""
    await service.create(message_in)
    return {"success": True, "message": "Message sent successfully"}


@admin_router.get("", response_model=List[ContactMessageRead])
async def list_messages(service: MessageService = Depends(get_message_service)) -> List[ContactMessageRead]:
    """Return every message, newest first."""
    return await service.list()


@admin_router.get("/{message_id}", response_model=ContactMessageRead)
async def get_message(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> ContactMessageRead:
    message = await service.get(message_id)
    if message is None:
        raise NotFoundError("Message not found")
    return message


@admin_router.patch("/{message_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_message_read(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> None:
    """Flag a message as read.  Repeating the call on the same message is harmless."""
    if not await service.mark_read(message_id):
        raise NotFoundError("Message not found")
    return None
