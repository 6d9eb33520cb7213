"""
Pydantic schemas for newsletter subscribers.

Addresses are stored lowercased so that the unique constraint catches
the same mailbox written with different capitalisation.
"""

from pydantic import BaseModel, Field, field_validator

from .common import check_email


class _EmailPayload(BaseModel):
    email: str = Field(..., examples=["reader@example.org"])

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return check_email(v, required=True).lower()


class SubscriberCreate(_EmailPayload):
    """Public signup.  New subscribers always start active."""


class UnsubscribeRequest(_EmailPayload):
    pass


class SubscriberRead(BaseModel):
    id: str
    email: str
    active: bool
    subscribed_at: str
