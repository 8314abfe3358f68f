"""Port interface for the Geocoding Client."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> GeoPoint | None:
        """Resolve a free-text "{address}, {city}, {country}" query.

        Only the first match is used. Returns None when there is no match,
        the provider answers with an error status, or the request fails.
        """
        ...
