"""Nominatim geocoder adapter: implements GeocoderPort for Indian addresses."""

from __future__ import annotations

import logging

import httpx

from college_finder.adapters.geocoder.cache import DEFAULT_MAX_ENTRIES, GeocodeCache
from college_finder.adapters.geocoder.static_adapter import StaticGeocoderAdapter
from college_finder.application.ports.geocoder_port import GeocoderPort
from college_finder.config import settings
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """Nominatim geocoding with city table fallback and caching.

    Only answers Nominatim actually gave are cached. When the request fails
    the city table answers for now and the next call asks Nominatim again.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        cache_size: int = DEFAULT_MAX_ENTRIES,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout
        self._transport = transport
        self._cache = GeocodeCache(cache_size)

    async def geocode(self, address: str) -> GeoPoint | None:
        """Geocode an address string to GeoPoint.

        Strategy:
        1. Check in-memory cache
        2. Try Nominatim API
        3. Fall back to the static city table
        """
        if address in self._cache:
            logger.debug("Cache hit for '%s'", address)
            return self._cache.get(address)

        try:
            point = await self._nominatim_lookup(address)
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError):
            logger.exception("Nominatim API error for '%s'", address)
            return self._city_fallback(address)

        if point is None:
            point = self._city_fallback(address)

        self._cache.put(address, point)
        return point

    @staticmethod
    def _city_fallback(address: str) -> GeoPoint | None:
        point = StaticGeocoderAdapter.lookup(address)
        if point:
            logger.info("City table fallback resolved '%s'", address)
        return point

    async def _nominatim_lookup(self, address: str) -> GeoPoint | None:
        """Query Nominatim API. None means Nominatim found nothing.

        Raises:
            httpx.HTTPError: on transport failure or a non-2xx response.
        """
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(
                NOMINATIM_URL,
                params={
                    "q": address.strip(),
                    "format": "json",
                    "limit": 1,
                    "countrycodes": "in",
                },
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            response.raise_for_status()
            results = response.json()

        if results:
            lat = float(results[0]["lat"])
            lon = float(results[0]["lon"])
            logger.info("Nominatim resolved '%s' → (%f, %f)", address, lat, lon)
            return GeoPoint(latitude=lat, longitude=lon)

        logger.info("Nominatim returned no results for '%s'", address)
        return None
