"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.location_repo import LocationRepository
from app.domain.entities.location import Location
from app.domain.value_objects.geo_point import GeoPoint

SPRINGFIELD = GeoPoint(latitude=39.78, longitude=-89.65)


# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    """Returns ``default`` unless the address has an explicit answer."""

    def __init__(self, default: GeoPoint | None = None, answers: dict[str, GeoPoint | None] | None = None):
        self._default = default
        self._answers = answers or {}
        self.calls: list[str] = []

    async def geocode(self, address):
        self.calls.append(address)
        return self._answers.get(address, self._default)


class InMemoryLocationRepository(LocationRepository):
    def __init__(self):
        self.rows: dict[int, Location] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2025, 1, 1, 12, 0, 0)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def list_by_owner(self, shop):
        rows = [replace(loc) for loc in self.rows.values() if loc.shop == shop]
        return sorted(rows, key=lambda loc: (loc.created_at, loc.id), reverse=True)

    async def get_by_id(self, location_id):
        loc = self.rows.get(location_id)
        return replace(loc) if loc else None

    async def insert(self, location):
        now = self._tick()
        stored = replace(location, id=next(self._ids), created_at=now, updated_at=now)
        self.rows[stored.id] = stored
        return replace(stored)

    async def update(self, location_id, fields):
        loc = self.rows.get(location_id)
        if loc is None:
            return None
        values = dict(fields)
        lat = values.pop("latitude", loc.latitude)
        lon = values.pop("longitude", loc.longitude)
        stored = replace(
            loc, **values,
            coordinates=GeoPoint(latitude=lat, longitude=lon),
            updated_at=self._tick(),
        )
        self.rows[location_id] = stored
        return replace(stored)

    async def delete_by_id(self, location_id):
        return self.rows.pop(location_id, None) is not None

    async def delete_all_by_owner(self, shop):
        ids = [i for i, loc in self.rows.items() if loc.shop == shop]
        for i in ids:
            del self.rows[i]
        return len(ids)


class BrokenLocationRepository(InMemoryLocationRepository):
    """Storage that fails on every write."""

    async def insert(self, location):
        raise RuntimeError("connection reset")

    async def update(self, location_id, fields):
        raise RuntimeError("connection reset")

    async def delete_by_id(self, location_id):
        raise RuntimeError("connection reset")

    async def delete_all_by_owner(self, shop):
        raise RuntimeError("connection reset")


# ─── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def geocoder():
    return FakeGeocoder(default=SPRINGFIELD)


@pytest.fixture
def repo():
    return InMemoryLocationRepository()


@pytest.fixture
def broken_repo():
    return BrokenLocationRepository()


@pytest.fixture
def stored_location():
    """A location row as it would come back from storage."""
    return Location(
        id=5,
        shop="demo.myshopify.com",
        name="HQ",
        address="1 Main St",
        city="Springfield",
        country="US",
        coordinates=SPRINGFIELD,
        zip_code="62701",
        phone=None,
        created_at=datetime(2025, 1, 1, 12, 0, 0),
        updated_at=datetime(2025, 1, 1, 12, 0, 0),
    )
