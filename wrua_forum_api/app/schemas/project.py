"""
Pydantic models for projects.

A project is one of the forum's conservation initiatives.  Besides its
descriptive text it carries typed collections: ``gallery_images`` (an
ordered list of image URLs), ``impact_metrics`` (metric name to display
value, e.g. ``{"trees_planted": "15,000"}``) and ``sdgs`` (UN
Sustainable Development Goal numbers).
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import check_slug, clean_string_list

ProjectStatus = Literal["active", "completed", "planned"]


def _check_sdgs(values: Optional[List[int]]) -> Optional[List[int]]:
    if values is None:
        return None
    for goal in values:
        if not 1 <= goal <= 17:
            raise ValueError("SDG numbers must be between 1 and 17")
    return list(dict.fromkeys(values))


class _ProjectValidators(BaseModel):
    @field_validator("slug", check_fields=False)
    @classmethod
    def validate_slug(cls, v):
        return check_slug(v)

    @field_validator("sdgs", check_fields=False)
    @classmethod
    def validate_sdgs(cls, v):
        return _check_sdgs(v)

    @field_validator("gallery_images", check_fields=False)
    @classmethod
    def validate_gallery(cls, v):
        return clean_string_list(v)


class ProjectCreate(_ProjectValidators):
    """Schema for creating a project.  ``slug`` is derived from ``title`` when omitted."""

    title: str = Field(..., min_length=1, examples=["Mara River Riparian Restoration"])
    slug: Optional[str] = Field(None, examples=["mara-river-riparian-restoration"])
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, examples=["Mara Region"])
    category: str = Field(..., min_length=1, examples=["Riparian Restoration"])
    image_url: Optional[str] = None
    gallery_images: List[str] = Field(default_factory=list)
    impact_metrics: Dict[str, str] = Field(default_factory=dict, examples=[{"trees_planted": "15,000"}])
    sdgs: List[int] = Field(default_factory=list, examples=[[6, 13, 15]])
    funding_needed: Optional[str] = Field(None, examples=["$75,000"])
    timeline: Optional[str] = Field(None, examples=["2022 - 2025"])
    status: ProjectStatus = "active"


class ProjectUpdate(_ProjectValidators):
    """Schema for updating a project.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    gallery_images: Optional[List[str]] = None
    impact_metrics: Optional[Dict[str, str]] = None
    sdgs: Optional[List[int]] = None
    funding_needed: Optional[str] = None
    timeline: Optional[str] = None
    status: Optional[ProjectStatus] = None


class ProjectRead(BaseModel):
    """Schema for reading a project from the API."""

    id: str
    title: str
    slug: str
    description: str
    location: str
    category: str
    image_url: Optional[str] = None
    gallery_images: List[str] = Field(default_factory=list)
    impact_metrics: Dict[str, str] = Field(default_factory=dict)
    sdgs: List[int] = Field(default_factory=list)
    funding_needed: Optional[str] = None
    timeline: Optional[str] = None
    status: str
    created_at: str
    updated_at: str
