"""
Service layer for WRUAs.

Associations list alphabetically.  The network page searches by name,
location or focus area; ``list`` takes the search term and applies it
in SQL.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.utils import like_pattern
from ..schemas.wrua import WruaRead
from .base import ResourceService


class WruaService(ResourceService[WruaRead]):
    """CRUD for member associations."""

    table = "wruas"
    columns = (
        "name", "location", "lat", "lng", "focus_areas", "contact_person",
        "email", "phone", "description", "status", "member_since",
    )
    json_columns = {"focus_areas": []}
    nullable_columns = ("lat", "lng", "contact_person", "email", "phone", "description", "member_since")
    order_by = "name COLLATE NOCASE ASC, rowid ASC"
    read_model = WruaRead
    label = "WRUA"

    async def list(self, *, status: Optional[str] = None, search: Optional[str] = None) -> List[WruaRead]:
        clauses = []
        params: list = []
        if status:
            clauses.append("status = ?")
            params.append(status)
        if search:
            pattern = like_pattern(search)
            clauses.append(
                "(name LIKE ? ESCAPE '\\' OR location LIKE ? ESCAPE '\\' OR EXISTS ("
                "SELECT 1 FROM json_each(wruas.focus_areas) WHERE json_each.value LIKE ? ESCAPE '\\'))"
            )
            params.extend([pattern, pattern, pattern])
        return self._select(" AND ".join(clauses), params)
