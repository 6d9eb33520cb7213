"""
Newsletter signup endpoints.

Each address can subscribe once; a repeated signup answers 409 and
leaves the existing row alone.  Unsubscribing only clears the
``active`` flag so the history stays visible to administrators.
"""

from typing import Dict, List, Union

from fastapi import APIRouter, Depends, status

from ...schemas.newsletter import SubscriberCreate, SubscriberRead, UnsubscribeRequest
from ...services.subscriber_service import SubscriberService
from ..deps import get_subscriber_service

router = APIRouter()
admin_router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def subscribe(
    subscriber_in: SubscriberCreate,
    service: SubscriberService = Depends(get_subscriber_service),
) -> Dict[str, Union[bool, str]]:
    await service.create(subscriber_in)
    return {"success": True, "message": "Subscribed successfully"}


@router.post("/unsubscribe")
async def unsubscribe(
    body: UnsubscribeRequest,
    service: SubscriberService = Depends(get_subscriber_service),
) -> Dict[str, Union[bool, str]]:
    """Deactivate a subscription.  Unknown addresses get the same answer."""
    await service.unsubscribe(body.email)
    return {"success": True, "message": "Unsubscribed successfully"}


@admin_router.get("", response_model=List[SubscriberRead])
async def list_subscribers(
    service: SubscriberService = Depends(get_subscriber_service),
) -> List[SubscriberRead]:
    return await service.list()
