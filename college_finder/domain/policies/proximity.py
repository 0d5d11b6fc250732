"""Proximity search: entities within a radius of a point, nearest first."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from college_finder.domain.errors import InvalidArgumentError
from college_finder.domain.value_objects.geo_point import GeoPoint, haversine_km

T = TypeVar("T")


@dataclass(frozen=True)
class NearbyMatch(Generic[T]):
    """An entity annotated with its distance from the query origin."""

    entity: T
    distance_km: float


def find_nearby(
    origin: GeoPoint,
    radius_km: float,
    entities: Iterable[T],
    key: Callable[[T], GeoPoint | None],
) -> list[NearbyMatch[T]]:
    """Return the entities within *radius_km* of *origin*, nearest first.

    Args:
        origin: query point.
        radius_km: search radius in km; the boundary is inclusive.
        entities: candidates, never mutated.
        key: returns an entity's coordinates, or None when it has none.

    Returns:
        NearbyMatch pairs sorted ascending by distance. The sort is stable,
        so entities at exactly the same distance keep their input order.

    Raises:
        InvalidArgumentError: if radius_km is not a positive number.
    """
    if math.isnan(radius_km) or radius_km <= 0:
        raise InvalidArgumentError(f"Radius must be positive, got {radius_km}")

    matches: list[NearbyMatch[T]] = []
    for entity in entities:
        point = key(entity)
        if point is None:
            continue
        distance = haversine_km(origin, point)
        if distance <= radius_km:
            matches.append(NearbyMatch(entity=entity, distance_km=distance))

    matches.sort(key=lambda m: m.distance_km)
    return matches
