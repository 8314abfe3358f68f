"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude, longitude) -> "GeoPoint":
        """Build a point from numeric or numeric-string values.

        Raises ValueError / TypeError if either value is not a number.
        Range is not checked.
        """
        return cls(latitude=float(latitude), longitude=float(longitude))
