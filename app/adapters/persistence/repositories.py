"""SQLAlchemy repository implementations."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import LocationModel
from app.application.ports.location_repo import LocationRepository
from app.domain.entities.location import Location
from app.domain.value_objects.geo_point import GeoPoint

UPDATABLE_COLUMNS = frozenset(
    {"name", "address", "city", "country", "zip_code", "phone", "latitude", "longitude"}
)

# ─── Mappers ─────────────────────────────────────────────────────────


def _location_to_domain(m: LocationModel) -> Location:
    return Location(
        id=m.id,
        shop=m.shop,
        name=m.name,
        address=m.address,
        city=m.city,
        country=m.country,
        coordinates=GeoPoint(latitude=m.latitude, longitude=m.longitude),
        zip_code=m.zip_code,
        phone=m.phone,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlLocationRepository(LocationRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def list_by_owner(self, shop: str) -> list[Location]:
        result = await self._s.execute(
            select(LocationModel)
            .where(LocationModel.shop == shop)
            .order_by(LocationModel.created_at.desc(), LocationModel.id.desc())
        )
        return [_location_to_domain(m) for m in result.scalars()]

    async def get_by_id(self, location_id: int) -> Location | None:
        m = await self._s.get(LocationModel, location_id)
        return _location_to_domain(m) if m else None

    async def insert(self, location: Location) -> Location:
        m = LocationModel(
            shop=location.shop,
            name=location.name,
            address=location.address,
            city=location.city,
            country=location.country,
            zip_code=location.zip_code,
            phone=location.phone,
            latitude=location.latitude,
            longitude=location.longitude,
        )
        self._s.add(m)
        await self._s.flush()
        # Load server-side timestamps
        await self._s.refresh(m)
        return _location_to_domain(m)

    async def update(self, location_id: int, fields: dict[str, Any]) -> Location | None:
        unknown = set(fields) - UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Cannot update location columns: {', '.join(sorted(unknown))}")

        m = await self._s.get(LocationModel, location_id)
        if m is None:
            return None
        for column, value in fields.items():
            setattr(m, column, value)
        m.updated_at = func.now()
        await self._s.flush()
        await self._s.refresh(m)
        return _location_to_domain(m)

    async def delete_by_id(self, location_id: int) -> bool:
        result = await self._s.execute(
            delete(LocationModel).where(LocationModel.id == location_id)
        )
        await self._s.flush()
        return result.rowcount > 0

    async def delete_all_by_owner(self, shop: str) -> int:
        result = await self._s.execute(
            delete(LocationModel).where(LocationModel.shop == shop)
        )
        await self._s.flush()
        return result.rowcount
