"""
Pydantic schemas for blog posts.

Posts carry HTML ``content`` plus a short ``excerpt`` for listings.
Only posts with status ``published`` are visible on the public site;
drafts are listed through the admin endpoints.  ``published_date``
defaults to the moment of creation and drives the listing order.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import check_slug, clean_string_list

BlogStatus = Literal["draft", "published"]


class _BlogValidators(BaseModel):
    @field_validator("slug", check_fields=False)
    @classmethod
    def validate_slug(cls, v):
        return check_slug(v)

    @field_validator("tags", check_fields=False)
    @classmethod
    def validate_tags(cls, v):
        return clean_string_list(v)


class BlogPostCreate(_BlogValidators):
    """Schema for creating a blog post."""

    title: str = Field(..., min_length=1, examples=["Youth Training Program Graduates 150 New Water Stewards"])
    slug: Optional[str] = None
    content: str = Field(..., min_length=1, description="Post body as HTML")
    excerpt: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, examples=["Communications Team"])
    published_date: Optional[datetime] = None
    category: str = Field(..., min_length=1, examples=["Training"])
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    status: BlogStatus = "published"


class BlogPostUpdate(_BlogValidators):
    """Schema for updating a blog post; all fields optional."""

    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    published_date: Optional[datetime] = None
    category: Optional[str] = Field(None, min_length=1)
    tags: Optional[List[str]] = None
    featured_image: Optional[str] = None
    status: Optional[BlogStatus] = None


class BlogPostRead(BaseModel):
    id: str
    title: str
    slug: str
    content: str
    excerpt: str
    author: str
    published_date: str
    category: str
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    status: str
    created_at: str
    updated_at: str
