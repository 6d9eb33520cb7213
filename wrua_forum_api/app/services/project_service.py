"""
Service layer for projects.

Projects list newest first.  The public portfolio filters by category,
location and SDG; those filters run in SQL here rather than in the
browser, using SQLite's ``json_each`` to look inside the ``sdgs`` list.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.errors import ValidationError
from ..core.utils import like_pattern, slugify
from ..schemas.project import ProjectCreate, ProjectRead
from .base import ResourceService


class ProjectService(ResourceService[ProjectRead]):
    """CRUD and lookups for projects."""

    table = "projects"
    columns = (
        "title", "slug", "description", "location", "category", "image_url",
        "gallery_images", "impact_metrics", "sdgs", "funding_needed", "timeline", "status",
    )
    json_columns = {"gallery_images": [], "impact_metrics": {}, "sdgs": []}
    nullable_columns = ("image_url", "funding_needed", "timeline")
    unique_messages = {"slug": "A project with this slug already exists"}
    tracks_updated_at = True
    read_model = ProjectRead
    label = "project"

    async def list(
        self,
        *,
        category: Optional[str] = None,
        location: Optional[str] = None,
        sdg: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[ProjectRead]:
        """Return projects, newest first, optionally filtered.

        ``location`` matches as a case-insensitive substring so that
        "Mara" finds "Mara Region".
        """
        clauses = []
        params: list = []
        if category:
            clauses.append("category = ?")
            params.append(category)
        if location:
            clauses.append("location LIKE ? ESCAPE '\\'")
            params.append(like_pattern(location))
        if sdg is not None:
            clauses.append("EXISTS (SELECT 1 FROM json_each(projects.sdgs) WHERE json_each.value = ?)")
            params.append(sdg)
        if status:
            clauses.append("status = ?")
            params.append(status)
        return self._select(" AND ".join(clauses), params)

    async def get_by_slug(self, slug: str) -> Optional[ProjectRead]:
        rows = self._select("slug = ?", (slug,))
        return rows[0] if rows else None

    async def get_by_id_or_slug(self, id_or_slug: str) -> Optional[ProjectRead]:
        """Look the value up as an id first, then as a slug."""
        project = await self.get(id_or_slug)
        if project is None:
            project = await self.get_by_slug(id_or_slug)
        return project

    async def create(self, data: ProjectCreate) -> ProjectRead:  # type: ignore[override]
        """Insert a project, deriving ``slug`` from ``title`` when it is missing."""
        slug = data.slug or slugify(data.title)
        if not slug:
            raise ValidationError("Could not derive a slug from the title")
        return await super().create(data, slug=slug)
