"""Google Maps geocoder adapter: implements GeocoderPort, biased to India."""

from __future__ import annotations

import logging

import httpx

from college_finder.adapters.geocoder.cache import DEFAULT_MAX_ENTRIES, GeocodeCache
from college_finder.application.ports.geocoder_port import GeocoderPort
from college_finder.config import settings
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleMapsAdapter(GeocoderPort):
    """Google Geocoding API lookups with ``region=in`` so that bare city names
    such as "Hyderabad" resolve to the Indian city.

    A status other than OK (usually ZERO_RESULTS) is a definitive miss and is
    cached as None. Transport and HTTP errors are not cached.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        cache_size: int = DEFAULT_MAX_ENTRIES,
    ):
        self._api_key = api_key or settings.google_maps_api_key
        self._timeout = timeout
        self._transport = transport
        self._cache = GeocodeCache(cache_size)

    async def geocode(self, address: str) -> GeoPoint | None:
        if not self._api_key:
            logger.warning("Google Maps API key is not set. Skipping geocoding.")
            return None

        if address in self._cache:
            return self._cache.get(address)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    GOOGLE_GEOCODE_URL,
                    params={
                        "address": address,
                        "key": self._api_key,
                        "region": "in",
                        "language": "en",
                    },
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()

            if data["status"] == "OK":
                loc = data["results"][0]["geometry"]["location"]
                point = GeoPoint(latitude=loc["lat"], longitude=loc["lng"])
                logger.info("Google Maps resolved '%s' → (%f, %f)", address, point.latitude, point.longitude)
                self._cache.put(address, point)
                return point

            logger.warning("Google Maps could not resolve '%s': %s", address, data["status"])
            self._cache.put(address, None)
            return None

        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError):
            logger.exception("Google Maps API error for '%s'", address)
            return None
