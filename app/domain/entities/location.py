"""Location entity — a physical storefront location with coordinates."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class Location:
    id: int | None
    shop: str
    name: str
    address: str
    city: str
    country: str
    coordinates: GeoPoint
    zip_code: str | None = None
    phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "shop": self.shop,
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "country": self.country,
            "zip_code": self.zip_code,
            "phone": self.phone,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
