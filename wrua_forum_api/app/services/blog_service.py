"""
Service layer for blog posts.

Posts are ordered by ``published_date``, newest first.  Public listings
pass ``status="published"`` so drafts stay inside the admin panel.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import ValidationError
from ..core.utils import like_pattern, slugify
from ..schemas.blog import BlogPostCreate, BlogPostRead
from .base import ResourceService


class BlogService(ResourceService[BlogPostRead]):
    """CRUD and slug lookup for blog posts."""

    table = "blog_posts"
    columns = (
        "title", "slug", "content", "excerpt", "author", "published_date",
        "category", "tags", "featured_image", "status",
    )
    json_columns = {"tags": []}
    nullable_columns = ("featured_image",)
    unique_messages = {"slug": "A blog post with this slug already exists"}
    order_by = "published_date DESC, rowid DESC"
    tracks_updated_at = True
    read_model = BlogPostRead
    label = "blog post"

    async def list(
        self,
        *,
        status: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[BlogPostRead]:
        clauses = []
        params: list = []
        if status:
            clauses.append("status = ?")
            params.append(status)
        if category:
            clauses.append("category = ?")
            params.append(category)
        if search:
            pattern = like_pattern(search)
            clauses.append("(title LIKE ? ESCAPE '\\' OR excerpt LIKE ? ESCAPE '\\')")
            params.extend([pattern, pattern])
        return self._select(" AND ".join(clauses), params)

    async def get_by_slug(self, slug: str, *, status: Optional[str] = None) -> Optional[BlogPostRead]:
        if status:
            rows = self._select("slug = ? AND status = ?", (slug, status))
        else:
            rows = self._select("slug = ?", (slug,))
        return rows[0] if rows else None

    async def create(self, data: BlogPostCreate) -> BlogPostRead:  # type: ignore[override]
        """Insert a post; ``slug`` comes from ``title`` and ``published_date`` defaults to now."""
        slug = data.slug or slugify(data.title)
        if not slug:
            raise ValidationError("Could not derive a slug from the title")
        published = data.published_date or datetime.now(timezone.utc)
        return await super().create(data, slug=slug, published_date=published)
