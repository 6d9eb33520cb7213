"""
WRUA directory endpoints.

The public directory lists member associations alphabetically and can
be narrowed by status or a free-text query over name, location and
focus areas.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...core.errors import NotFoundError
from ...schemas.wrua import WruaCreate, WruaRead, WruaStatus, WruaUpdate
from ...services.wrua_service import WruaService
from ..deps import get_wrua_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[WruaRead])
async def list_wruas(
    status_filter: Optional[WruaStatus] = Query(None, alias="status"),
    q: Optional[str] = Query(None, description="Search name, location and focus areas"),
    service: WruaService = Depends(get_wrua_service),
) -> List[WruaRead]:
    return await service.list(status=status_filter, search=q)


@router.get("/{wrua_id}", response_model=WruaRead)
async def get_wrua(wrua_id: str, service: WruaService = Depends(get_wrua_service)) -> WruaRead:
    wrua = await service.get(wrua_id)
    if wrua is None:
        raise NotFoundError("WRUA not found")
    return wrua


@admin_router.get("", response_model=List[WruaRead])
async def admin_list_wruas(service: WruaService = Depends(get_wrua_service)) -> List[WruaRead]:
    return await service.list()


@admin_router.get("/{wrua_id}", response_model=WruaRead)
async def admin_get_wrua(wrua_id: str, service: WruaService = Depends(get_wrua_service)) -> WruaRead:
    return await get_wrua(wrua_id, service)


@admin_router.post("", response_model=WruaRead, status_code=status.HTTP_201_CREATED)
async def create_wrua(wrua_in: WruaCreate, service: WruaService = Depends(get_wrua_service)) -> WruaRead:
    return await service.create(wrua_in)


@admin_router.api_route("/{wrua_id}", methods=["PUT", "PATCH"], response_model=WruaRead)
async def update_wrua(
    wrua_id: str,
    wrua_in: WruaUpdate,
    service: WruaService = Depends(get_wrua_service),
) -> WruaRead:
    wrua = await service.update(wrua_id, wrua_in)
    if wrua is None:
        raise NotFoundError("WRUA not found")
    return wrua


@admin_router.delete("/{wrua_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wrua(wrua_id: str, service: WruaService = Depends(get_wrua_service)) -> None:
    await service.delete(wrua_id)
    return None
