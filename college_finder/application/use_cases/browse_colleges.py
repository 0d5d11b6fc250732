"""Catalog use cases: list, fetch and register colleges."""

from __future__ import annotations

import logging

from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.domain.entities.college import College
from college_finder.domain.errors import CollegeNotFoundError

logger = logging.getLogger(__name__)


class ListCollegesUseCase:
    def __init__(self, college_repo: CollegeRepository):
        self._colleges = college_repo

    async def execute(self) -> list[College]:
        return await self._colleges.get_all_active()


class GetCollegeUseCase:
    def __init__(self, college_repo: CollegeRepository):
        self._colleges = college_repo

    async def execute(self, college_id: str) -> College:
        """Return the college with *college_id*.

        Inactive colleges are still returned by id, as the catalog
        only hides them from listings.

        Raises:
            CollegeNotFoundError: if no such college exists.
        """
        college = await self._colleges.get_by_id(college_id)
        if college is None:
            raise CollegeNotFoundError(college_id)
        return college


class CreateCollegeUseCase:
    def __init__(self, college_repo: CollegeRepository):
        self._colleges = college_repo

    async def execute(self, college: College) -> College:
        college.is_active = True
        saved = await self._colleges.save(college)
        logger.info("Registered college %s (%s)", saved.id, saved.name)
        return saved
