"""
Pydantic schemas for site settings.

A setting is a key with an arbitrary JSON value, for example the
``stats`` counters shown on the home page.
"""

from typing import Any

from pydantic import BaseModel, Field


class SettingUpdate(BaseModel):
    """Body of ``PUT /api/admin/settings/{key}``."""

    value: Any = Field(..., examples=[{"wruas": 30, "projects": 45, "hectares": "12,500", "communities": "150"}])


class SettingRead(BaseModel):
    key: str
    value: Any
    updated_at: str
