"""GeocodeAddressUseCase: resolve a free-text address to coordinates."""

from __future__ import annotations

import logging

from college_finder.application.ports.geocoder_port import GeocoderPort
from college_finder.domain.errors import InvalidArgumentError
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class GeocodeAddressUseCase:
    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    async def execute(self, address: str) -> GeoPoint | None:
        """Geocode *address*; None when the provider cannot resolve it.

        Raises:
            InvalidArgumentError: if the address is blank.
        """
        if not address or not address.strip():
            raise InvalidArgumentError("Address is required")

        point = await self._geocoder.geocode(address)
        if point is None:
            logger.warning("Could not geocode '%s'", address)
        return point
