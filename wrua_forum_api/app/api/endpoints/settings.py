"""
Site settings endpoints.

Administrators read and replace key/value settings at runtime.  Values
are arbitrary JSON; the ``stats`` key feeds ``GET /api/stats``.
"""

from typing import List

from fastapi import APIRouter, Depends

from ...core.errors import NotFoundError
from ...schemas.setting import SettingRead, SettingUpdate
from ...services.settings_service import SettingsService
from ..deps import get_settings_service

admin_router = APIRouter()


@admin_router.get("", response_model=List[SettingRead])
async def list_settings(service: SettingsService = Depends(get_settings_service)) -> List[SettingRead]:
    return await service.list_settings()


@admin_router.get("/{key}", response_model=SettingRead)
async def get_setting(key: str, service: SettingsService = Depends(get_settings_service)) -> SettingRead:
    setting = await service.get_setting(key)
    if setting is None:
        raise NotFoundError("Setting not found")
    return setting


@admin_router.put("/{key}", response_model=SettingRead)
async def upsert_setting(
    key: str,
    body: SettingUpdate,
    service: SettingsService = Depends(get_settings_service),
) -> SettingRead:
    """Insert or replace the value stored under ``key``."""
    return await service.upsert_setting(key, body.value)
