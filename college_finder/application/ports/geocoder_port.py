"""Port interface for turning a user-typed address into coordinates."""

from abc import ABC, abstractmethod

from college_finder.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> GeoPoint | None:
        """Resolve *address* (a street address or just a city name) to a GeoPoint.

        Returns None when the provider has no match. Implementations do not
        raise on provider failures; they log and return their best answer.
        """
        ...
