"""Bounded in-process cache for geocoding answers."""

from __future__ import annotations

from collections import OrderedDict

from college_finder.domain.value_objects.geo_point import GeoPoint

DEFAULT_MAX_ENTRIES = 1024


class GeocodeCache:
    """Address → GeoPoint (or None for "provider has no match").

    Keys are normalized addresses. Once *max_entries* is reached the least
    recently used entry is evicted.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, GeoPoint | None] = OrderedDict()

    @staticmethod
    def key(address: str) -> str:
        return address.strip().lower()

    def __contains__(self, address: str) -> bool:
        return self.key(address) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, address: str) -> GeoPoint | None:
        """Cached answer for *address*; raises KeyError when not cached."""
        key = self.key(address)
        point = self._entries[key]
        self._entries.move_to_end(key)
        return point

    def put(self, address: str, point: GeoPoint | None) -> None:
        key = self.key(address)
        self._entries[key] = point
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
