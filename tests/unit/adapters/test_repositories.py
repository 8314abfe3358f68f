"""Tests for SqlLocationRepository on an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.adapters.persistence.database import Base
from app.adapters.persistence.models import LocationModel
from app.adapters.persistence.repositories import SqlLocationRepository
from app.domain.entities.location import Location
from app.domain.value_objects.geo_point import GeoPoint

SHOP = "demo.myshopify.com"


@pytest_asyncio.fixture
async def session():
    # StaticPool keeps one connection so the in-memory database survives
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


def _location(name="HQ", shop=SHOP) -> Location:
    return Location(
        id=None, shop=shop, name=name, address="1 Main St",
        city="Springfield", country="US",
        coordinates=GeoPoint(latitude=39.78, longitude=-89.65),
        zip_code="62701",
    )


# ─── insert / get ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_insert_assigns_id_and_timestamps(session):
    repo = SqlLocationRepository(session)

    loc = await repo.insert(_location())

    assert loc.id == 1
    assert loc.created_at is not None
    assert loc.updated_at is not None
    assert loc.coordinates == GeoPoint(latitude=39.78, longitude=-89.65)
    assert await repo.get_by_id(loc.id) == loc


@pytest.mark.asyncio
async def test_get_unknown_id(session):
    assert await SqlLocationRepository(session).get_by_id(42) is None


# ─── list ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_newest_first_scoped_by_owner(session):
    repo = SqlLocationRepository(session)
    await repo.insert(_location("A"))
    await repo.insert(_location("B"))
    await repo.insert(_location("Elsewhere", shop="other.myshopify.com"))

    names = [loc.name for loc in await repo.list_by_owner(SHOP)]

    # Same-second timestamps fall back to id order
    assert names == ["B", "A"]


# ─── update ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_merges_only_given_fields(session):
    repo = SqlLocationRepository(session)
    loc = await repo.insert(_location())

    updated = await repo.update(loc.id, {"phone": "555-0100"})

    assert updated.phone == "555-0100"
    assert updated.name == "HQ"
    assert updated.zip_code == "62701"
    assert updated.coordinates == loc.coordinates
    assert updated.created_at == loc.created_at
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_update_coordinates(session):
    repo = SqlLocationRepository(session)
    loc = await repo.insert(_location())

    updated = await repo.update(loc.id, {"city": "Chicago", "latitude": 41.88, "longitude": -87.63})

    assert updated.city == "Chicago"
    assert updated.coordinates == GeoPoint(latitude=41.88, longitude=-87.63)


@pytest.mark.asyncio
async def test_update_unknown_id(session):
    assert await SqlLocationRepository(session).update(42, {"name": "X"}) is None


@pytest.mark.asyncio
async def test_update_rejects_unknown_columns(session):
    repo = SqlLocationRepository(session)
    loc = await repo.insert(_location())

    with pytest.raises(ValueError, match="shop"):
        await repo.update(loc.id, {"shop": "stolen.myshopify.com"})


# ─── delete ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_by_id(session):
    repo = SqlLocationRepository(session)
    loc = await repo.insert(_location())

    assert await repo.delete_by_id(loc.id) is True
    assert await repo.delete_by_id(loc.id) is False
    assert await session.get(LocationModel, loc.id) is None


@pytest.mark.asyncio
async def test_delete_all_by_owner_counts(session):
    repo = SqlLocationRepository(session)
    await repo.insert(_location("A"))
    await repo.insert(_location("B"))
    await repo.insert(_location("Elsewhere", shop="other.myshopify.com"))

    assert await repo.delete_all_by_owner(SHOP) == 2
    assert await repo.delete_all_by_owner(SHOP) == 0
    assert [loc.name for loc in await repo.list_by_owner("other.myshopify.com")] == ["Elsewhere"]
