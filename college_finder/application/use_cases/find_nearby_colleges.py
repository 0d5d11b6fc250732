"""FindNearbyCollegesUseCase: active colleges within a radius, nearest first."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.domain.entities.college import College
from college_finder.domain.policies.proximity import NearbyMatch, find_nearby
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearbySearchResult:
    """Matches for one proximity query, with the query echoed back."""

    origin: GeoPoint
    radius_km: float
    matches: list[NearbyMatch[College]]


class FindNearbyCollegesUseCase:
    def __init__(self, college_repo: CollegeRepository):
        self._colleges = college_repo

    async def execute(self, origin: GeoPoint, radius_km: float) -> NearbySearchResult:
        """Find active colleges within *radius_km* of *origin*.

        Raises:
            InvalidArgumentError: if radius_km is not positive.
        """
        colleges = await self._colleges.get_all_active()
        matches = find_nearby(origin, radius_km, colleges, key=lambda c: c.coordinates)
        logger.info(
            "Nearby (%f, %f) r=%.1f km: %d of %d colleges",
            origin.latitude, origin.longitude, radius_km, len(matches), len(colleges),
        )
        return NearbySearchResult(origin=origin, radius_km=radius_km, matches=matches)
