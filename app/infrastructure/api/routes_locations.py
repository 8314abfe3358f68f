"""Admin location endpoints — list, create, update, delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.application.use_cases.manage_locations import LocationService
from app.domain.policies.location_input import parse_new_location, parse_patch
from app.domain.value_objects.result import Err
from app.infrastructure.api.dependencies import get_location_service, require_shop
from app.infrastructure.api.responses import error_response, success

router = APIRouter(prefix="/locations", tags=["locations"])

# ── Request schema ─────────────────────────────────────────────────
# Required fields are optional here so that missing values reach the
# domain validation and come back in the result envelope.


class LocationPayload(BaseModel):
    name: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    zip_code: str | None = None
    phone: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    manual_coordinates: bool = False


# ── Endpoints ───────────────────────────────────────────────────────


@router.get("")
async def list_locations(
    shop: str = Depends(require_shop),
    service: LocationService = Depends(get_location_service),
):
    """List the shop's locations, newest first."""
    result = await service.list_for_owner(shop)
    if isinstance(result, Err):
        return error_response(result)
    return success(locations=[loc.to_dict() for loc in result.value])


@router.post("", status_code=201)
async def create_location(
    body: LocationPayload,
    shop: str = Depends(require_shop),
    service: LocationService = Depends(get_location_service),
):
    """Create a location; coordinates come from the geocoder unless supplied manually."""
    parsed = parse_new_location(shop=shop, **body.model_dump())
    if isinstance(parsed, Err):
        return error_response(parsed)

    result = await service.create(parsed.value)
    if isinstance(result, Err):
        return error_response(result)
    return success(location=result.value.to_dict())


@router.patch("/{location_id}", dependencies=[Depends(require_shop)])
async def update_location(
    location_id: int,
    body: LocationPayload,
    service: LocationService = Depends(get_location_service),
):
    """Partially update a location. Address changes trigger a fresh geocode."""
    values = body.model_dump(
        exclude_unset=True,
        exclude={"latitude", "longitude", "manual_coordinates"},
    )
    parsed = parse_patch(
        values,
        latitude=body.latitude,
        longitude=body.longitude,
        manual_coordinates=body.manual_coordinates,
    )
    if isinstance(parsed, Err):
        return error_response(parsed)

    result = await service.update(location_id, parsed.value)
    if isinstance(result, Err):
        return error_response(result)
    return success(location=result.value.to_dict())


@router.delete("/{location_id}", dependencies=[Depends(require_shop)])
async def delete_location(
    location_id: int,
    service: LocationService = Depends(get_location_service),
):
    result = await service.delete_one(location_id)
    if isinstance(result, Err):
        return error_response(result)
    return success(id=result.value)


@router.delete("")
async def delete_all_locations(
    shop: str = Depends(require_shop),
    service: LocationService = Depends(get_location_service),
):
    """Remove every location of the calling shop."""
    result = await service.delete_all_for_owner(shop)
    if isinstance(result, Err):
        return error_response(result)
    return success(count=result.value)
