"""FastAPI dependency injection — wires adapters into the location service."""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import SqlLocationRepository
from app.application.ports.geocoder_port import GeocoderPort
from app.application.use_cases.manage_locations import LocationService

# Re-export session dependency
get_db_session = get_session

# Stateless, shared across requests
_geocoder_adapter = NominatimAdapter()


def get_geocoder() -> GeocoderPort:
    return _geocoder_adapter


def get_location_repo(session: AsyncSession = Depends(get_session)) -> SqlLocationRepository:
    return SqlLocationRepository(session)


def get_location_service(
    geocoder: GeocoderPort = Depends(get_geocoder),
    location_repo: SqlLocationRepository = Depends(get_location_repo),
) -> LocationService:
    return LocationService(geocoder=geocoder, location_repo=location_repo)


def require_shop(x_shop_domain: str | None = Header(default=None)) -> str:
    """Owner key of the calling admin session."""
    shop = (x_shop_domain or "").strip()
    if not shop:
        raise HTTPException(status_code=400, detail="X-Shop-Domain header required")
    return shop
