"""
Pydantic models for Water Resource Users Associations (WRUAs).

WRUAs are the member organisations of the forum.  Coordinates are
optional decimal degrees used by the network map; ``focus_areas`` is an
ordered list of short labels.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import check_email, clean_string_list

WruaStatus = Literal["active", "inactive"]


class _WruaValidators(BaseModel):
    @field_validator("email", check_fields=False)
    @classmethod
    def validate_email(cls, v):
        return check_email(v)

    @field_validator("focus_areas", check_fields=False)
    @classmethod
    def validate_focus_areas(cls, v):
        return clean_string_list(v)


class WruaCreate(_WruaValidators):
    """Schema for registering a WRUA with the forum."""

    name: str = Field(..., min_length=1, examples=["Mara-Serengeti WRUA"])
    location: str = Field(..., min_length=1, examples=["Mara Region"])
    lat: Optional[float] = Field(None, ge=-90, le=90, examples=[-1.45])
    lng: Optional[float] = Field(None, ge=-180, le=180, examples=[35.05])
    focus_areas: List[str] = Field(default_factory=list)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    status: WruaStatus = "active"
    member_since: Optional[str] = Field(None, examples=["2015"])


class WruaUpdate(_WruaValidators):
    """Partial update; only provided fields are written."""

    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)
    focus_areas: Optional[List[str]] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    status: Optional[WruaStatus] = None
    member_since: Optional[str] = None


class WruaRead(BaseModel):
    id: str
    name: str
    location: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    focus_areas: List[str] = Field(default_factory=list)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    status: str
    member_since: Optional[str] = None
    created_at: str
