"""SearchCollegesUseCase: filter the active catalog."""

from __future__ import annotations

import logging

from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.domain.entities.college import College
from college_finder.domain.policies.college_filters import SearchFilters, filter_colleges

logger = logging.getLogger(__name__)


class SearchCollegesUseCase:
    def __init__(self, college_repo: CollegeRepository):
        self._colleges = college_repo

    async def execute(self, filters: SearchFilters) -> list[College]:
        colleges = await self._colleges.get_all_active()
        results = filter_colleges(colleges, filters)
        logger.info("Search %s matched %d/%d colleges", filters.normalized(), len(results), len(colleges))
        return results
