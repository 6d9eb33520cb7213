"""
Pydantic schemas for messages sent through the public contact form.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import check_email


class ContactMessageCreate(BaseModel):
    """Payload of ``POST /api/contact``.  ``read`` is never accepted from callers."""

    name: str = Field(..., min_length=1, examples=["Jane Achieng"])
    email: str = Field(..., examples=["jane@example.org"])
    organization: Optional[str] = None
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return check_email(v, required=True)


class ContactMessageRead(BaseModel):
    id: str
    name: str
    email: str
    organization: Optional[str] = None
    subject: str
    message: str
    read: bool
    created_at: str
