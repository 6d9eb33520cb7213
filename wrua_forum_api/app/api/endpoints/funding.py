"""Funding opportunity endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...core.errors import NotFoundError
from ...schemas.funding import (
    FundingOpportunityCreate,
    FundingOpportunityRead,
    FundingOpportunityUpdate,
    FundingStatus,
)
from ...services.funding_service import FundingService
from ..deps import get_funding_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[FundingOpportunityRead])
async def list_funding(
    status_filter: Optional[FundingStatus] = Query(None, alias="status"),
    focus_area: Optional[str] = None,
    service: FundingService = Depends(get_funding_service),
) -> List[FundingOpportunityRead]:
    return await service.list(status=status_filter, focus_area=focus_area)


@admin_router.get("", response_model=List[FundingOpportunityRead])
async def admin_list_funding(service: FundingService = Depends(get_funding_service)) -> List[FundingOpportunityRead]:
    return await service.list()


@admin_router.get("/{funding_id}", response_model=FundingOpportunityRead)
async def get_funding(
    funding_id: str,
    service: FundingService = Depends(get_funding_service),
) -> FundingOpportunityRead:
    item = await service.get(funding_id)
    if item is None:
        raise NotFoundError("Funding opportunity not found")
    return item


@admin_router.post("", response_model=FundingOpportunityRead, status_code=status.HTTP_201_CREATED)
async def create_funding(
    funding_in: FundingOpportunityCreate,
    service: FundingService = Depends(get_funding_service),
) -> FundingOpportunityRead:
    return await service.create(funding_in)


@admin_router.api_route("/{funding_id}", methods=["PUT", "PATCH"], response_model=FundingOpportunityRead)
async def update_funding(
    funding_id: str,
    funding_in: FundingOpportunityUpdate,
    service: FundingService = Depends(get_funding_service),
) -> FundingOpportunityRead:
    item = await service.update(funding_id, funding_in)
    if item is None:
        raise NotFoundError("Funding opportunity not found")
    return item


@admin_router.delete("/{funding_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_funding(funding_id: str, service: FundingService = Depends(get_funding_service)) -> None:
    await service.delete(funding_id)
    return None
