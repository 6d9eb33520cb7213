"""
Blog endpoints.

Visitors only ever see published posts: drafts are excluded from the
public list and a draft's slug answers 404.  Administrators list and
edit every post by id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...core.errors import NotFoundError
from ...schemas.blog import BlogPostCreate, BlogPostRead, BlogPostUpdate, BlogStatus
from ...services.blog_service import BlogService
from ..deps import get_blog_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[BlogPostRead])
async def list_posts(
    category: Optional[str] = None,
    q: Optional[str] = Query(None, description="Search titles and excerpts"),
    service: BlogService = Depends(get_blog_service),
) -> List[BlogPostRead]:
    """Return published posts, most recent publication date first."""
    return await service.list(status="published", category=category, search=q)


@router.get("/{slug}", response_model=BlogPostRead)
async def get_post(slug: str, service: BlogService = Depends(get_blog_service)) -> BlogPostRead:
    post = await service.get_by_slug(slug, status="published")
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


@admin_router.get("", response_model=List[BlogPostRead])
async def admin_list_posts(
    status_filter: Optional[BlogStatus] = Query(None, alias="status"),
    service: BlogService = Depends(get_blog_service),
) -> List[BlogPostRead]:
    """Return every post, drafts included."""
    return await service.list(status=status_filter)


@admin_router.get("/{post_id}", response_model=BlogPostRead)
async def admin_get_post(post_id: str, service: BlogService = Depends(get_blog_service)) -> BlogPostRead:
    post = await service.get(post_id)
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


@admin_router.post("", response_model=BlogPostRead, status_code=status.HTTP_201_CREATED)
async def create_post(post_in: BlogPostCreate, service: BlogService = Depends(get_blog_service)) -> BlogPostRead:
    return await service.create(post_in)


@admin_router.api_route("/{post_id}", methods=["PUT", "PATCH"], response_model=BlogPostRead)
async def update_post(
    post_id: str,
    post_in: BlogPostUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostRead:
    post = await service.update(post_id, post_in)
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


@admin_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, service: BlogService = Depends(get_blog_service)) -> None:
    await service.delete(post_id)
    return None
