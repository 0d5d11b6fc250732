"""Static geocoder adapter: lookup table of major Indian cities, no network."""

from __future__ import annotations

import logging
import re

from college_finder.application.ports.geocoder_port import GeocoderPort
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

CITY_CENTROIDS: dict[str, GeoPoint] = {
    "delhi": GeoPoint(latitude=28.6139, longitude=77.2090),
    "mumbai": GeoPoint(latitude=19.0760, longitude=72.8777),
    "bangalore": GeoPoint(latitude=12.9716, longitude=77.5946),
    "chennai": GeoPoint(latitude=13.0827, longitude=80.2707),
    "kolkata": GeoPoint(latitude=22.5726, longitude=88.3639),
    "pune": GeoPoint(latitude=18.5204, longitude=73.8567),
    "hyderabad": GeoPoint(latitude=17.3850, longitude=78.4867),
}

# Alternative and former city names
CITY_ALIASES: dict[str, str] = {
    "new delhi": "delhi",
    "bombay": "mumbai",
    "bengaluru": "bangalore",
    "madras": "chennai",
    "calcutta": "kolkata",
    "poona": "pune",
}

# Longest names first so "new delhi" wins over "delhi" at the same position
_CITY_NAMES = sorted([*CITY_CENTROIDS, *CITY_ALIASES], key=len, reverse=True)
_CITY_NAME_RE = re.compile(r"\b(" + "|".join(map(re.escape, _CITY_NAMES)) + r")\b")


class StaticGeocoderAdapter(GeocoderPort):
    """Resolves city names from a fixed table.

    Addresses that name no known city resolve to *default_city* when one is
    configured, otherwise to None.
    """

    def __init__(self, default_city: str | None = "delhi"):
        default_key = default_city.strip().lower() if default_city else ""
        if default_key and self.lookup(default_key) is None:
            raise ValueError(f"Unknown default city: {default_city}")
        self._default_city = default_key or None

    async def geocode(self, address: str) -> GeoPoint | None:
        point = self.lookup(address)
        if point:
            return point

        if self._default_city:
            logger.info("No city match for '%s', using default city '%s'", address, self._default_city)
            return self.lookup(self._default_city)

        logger.warning("No geocoding result for '%s'", address)
        return None

    @staticmethod
    def lookup(address: str) -> GeoPoint | None:
        """Exact city match first, otherwise the last known city or alias named in the address.

        Names match whole words only, so "Punekar Nagar, Hyderabad" resolves to Hyderabad.
        """
        key = address.strip().lower()
        key = CITY_ALIASES.get(key, key)
        if key in CITY_CENTROIDS:
            return CITY_CENTROIDS[key]

        names = _CITY_NAME_RE.findall(key)
        if not names:
            return None

        city = CITY_ALIASES.get(names[-1], names[-1])
        logger.debug("City match: '%s' → %s", address, city)
        return CITY_CENTROIDS[city]
