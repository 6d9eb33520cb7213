"""
Service layer for funding opportunities.
"""

from __future__ import annotations

from typing import List, Optional

from ..schemas.funding import FundingOpportunityRead
from .base import ResourceService


class FundingService(ResourceService[FundingOpportunityRead]):
    table = "funding_opportunities"
    columns = ("name", "source", "amount", "deadline", "focus_areas", "alignment_score", "status", "notes")
    json_columns = {"focus_areas": []}
    nullable_columns = ("amount", "deadline", "alignment_score", "notes")
    read_model = FundingOpportunityRead
    label = "funding opportunity"

    async def list(self, *, status: Optional[str] = None, focus_area: Optional[str] = None) -> List[FundingOpportunityRead]:
        """Return opportunities newest first, filtered by status and focus area."""
        clauses = []
        params: list = []
        if status:
            clauses.append("status = ?")
            params.append(status)
        if focus_area:
            clauses.append(
                "EXISTS (SELECT 1 FROM json_each(funding_opportunities.focus_areas) WHERE json_each.value = ?)"
            )
            params.append(focus_area)
        return self._select(" AND ".join(clauses), params)
