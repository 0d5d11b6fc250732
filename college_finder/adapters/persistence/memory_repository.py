"""In-memory CollegeRepository: the default catalog store for a single process."""

from __future__ import annotations

import asyncio
import copy
import logging
import uuid
from datetime import datetime, timezone

from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.domain.entities.college import College

logger = logging.getLogger(__name__)


class InMemoryCollegeRepository(CollegeRepository):
    """Dict-backed catalog.

    Records are copied on the way in and on the way out, so callers never
    hold a reference into the store. Writes are serialized by a lock.
    """

    def __init__(self, colleges: list[College] | None = None):
        self._colleges: dict[str, College] = {}
        self._lock = asyncio.Lock()
        for college in colleges or []:
            if college.id is None:
                raise ValueError(f"Seed college '{college.name}' has no id")
            self._colleges[college.id] = copy.deepcopy(college)
        logger.info("In-memory catalog seeded with %d colleges", len(self._colleges))

    async def save(self, college: College) -> College:
        stored = copy.deepcopy(college)
        stored.id = str(uuid.uuid4())
        stored.created_at = datetime.now(timezone.utc).isoformat()
        async with self._lock:
            self._colleges[stored.id] = stored
        college.id = stored.id
        college.created_at = stored.created_at
        return copy.deepcopy(stored)

    async def get_by_id(self, college_id: str) -> College | None:
        college = self._colleges.get(college_id)
        return copy.deepcopy(college) if college else None

    async def get_all_active(self) -> list[College]:
        snapshot = list(self._colleges.values())
        return [copy.deepcopy(c) for c in snapshot if c.is_active]
