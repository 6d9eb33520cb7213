"""
Pydantic models for admin users.

Only administrators have accounts.  The stored password hash never
leaves the service layer: ``UserRead`` has no password field.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering an administrator."""

    username: str = Field(..., min_length=1, max_length=64, examples=["admin"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserLogin(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str


class LoginResponse(BaseModel):
    token: str
    user: UserRead
