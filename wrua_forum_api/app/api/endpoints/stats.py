"""
Home-page statistics.

The figures are editorial, not computed: they are whatever the admin
stored in the ``stats`` setting, or a built-in default set.
"""

from typing import Any

from fastapi import APIRouter, Depends

from ...services.settings_service import SettingsService
from ..deps import get_settings_service

router = APIRouter()


@router.get("")
async def get_stats(service: SettingsService = Depends(get_settings_service)) -> Any:
    return await service.get_stats()
