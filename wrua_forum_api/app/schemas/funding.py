"""
Pydantic schemas for funding opportunities.

Funding opportunities are grants the forum tracks.  ``status`` is set by
administrators; in particular ``closing soon`` is chosen by hand and is
never computed from ``deadline``, which is free text (e.g. "March 31,
2025").
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import clean_string_list

FundingStatus = Literal["open", "closing soon", "closed", "won"]


class FundingOpportunityCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Global Water Partnership Small Grants"])
    source: str = Field(..., min_length=1, examples=["Global Water Partnership"])
    amount: Optional[str] = Field(None, examples=["$25,000 - $50,000"])
    deadline: Optional[str] = Field(None, examples=["March 31, 2025"])
    focus_areas: List[str] = Field(default_factory=list)
    alignment_score: Optional[str] = Field(None, examples=["High"])
    status: FundingStatus = "open"
    notes: Optional[str] = None

    @field_validator("focus_areas")
    @classmethod
    def validate_focus_areas(cls, v):
        return clean_string_list(v)


class FundingOpportunityUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    source: Optional[str] = Field(None, min_length=1)
    amount: Optional[str] = None
    deadline: Optional[str] = None
    focus_areas: Optional[List[str]] = None
    alignment_score: Optional[str] = None
    status: Optional[FundingStatus] = None
    notes: Optional[str] = None

    @field_validator("focus_areas")
    @classmethod
    def validate_focus_areas(cls, v):
        return clean_string_list(v)


class FundingOpportunityRead(BaseModel):
    id: str
    name: str
    source: str
    amount: Optional[str] = None
    deadline: Optional[str] = None
    focus_areas: List[str] = Field(default_factory=list)
    alignment_score: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: str
