"""LocationService — validate → geocode → persist for store locations."""

from __future__ import annotations

import logging

from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.location_repo import LocationRepository
from app.domain.entities.location import Location
from app.domain.policies.location_input import (
    CoordinateSpec,
    GeocodeAddress,
    LocationPatch,
    NewLocation,
)
from app.domain.value_objects.enums import ErrorKind
from app.domain.value_objects.geo_point import GeoPoint
from app.domain.value_objects.result import Err, Ok, Result

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Location not found."
CREATE_GEOCODE_MESSAGE = "Could not find coordinates for the address. Please verify the address is correct."
UPDATE_GEOCODE_MESSAGE = "Could not find coordinates for the updated address."
LIST_FAILED_MESSAGE = "An error occurred while loading locations."
CREATE_FAILED_MESSAGE = "An error occurred while creating the location."
UPDATE_FAILED_MESSAGE = "An error occurred while updating the location."
DELETE_FAILED_MESSAGE = "An error occurred while deleting the location."
DELETE_ALL_FAILED_MESSAGE = "An error occurred while deleting locations."


class LocationService:
    """Orchestrates location CRUD with geocoding.

    Every public method returns ``Ok`` or ``Err`` and never raises.
    """

    def __init__(self, geocoder: GeocoderPort, location_repo: LocationRepository):
        self._geocoder = geocoder
        self._locations = location_repo

    async def list_for_owner(self, shop: str) -> Result[list[Location]]:
        try:
            return Ok(await self._locations.list_by_owner(shop))
        except Exception:
            logger.exception("Error listing locations for shop %s", shop)
            return Err(ErrorKind.INTERNAL, LIST_FAILED_MESSAGE)

    async def create(self, data: NewLocation) -> Result[Location]:
        try:
            point = await self._resolve(data.coordinates)
            if point is None:
                return Err(ErrorKind.GEOCODING, CREATE_GEOCODE_MESSAGE)

            location = await self._locations.insert(
                Location(
                    id=None,
                    shop=data.shop,
                    name=data.name,
                    address=data.address.address,
                    city=data.address.city,
                    country=data.address.country,
                    coordinates=point,
                    zip_code=data.zip_code,
                    phone=data.phone,
                )
            )
            logger.info(
                "Location %s created for shop %s (%s) at (%f, %f)",
                location.id, location.shop, data.coordinates.source.value,
                point.latitude, point.longitude,
            )
            return Ok(location)
        except Exception:
            logger.exception("Error creating location for shop %s", data.shop)
            return Err(ErrorKind.INTERNAL, CREATE_FAILED_MESSAGE)

    async def update(self, location_id: int, patch: LocationPatch) -> Result[Location]:
        """Apply a partial update.

        Changing any of address/city/country forces a fresh geocode, which
        must succeed before anything is written. Other fields keep the
        stored coordinates untouched.
        """
        try:
            existing = await self._locations.get_by_id(location_id)
            if existing is None:
                return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
            if patch.is_empty():
                return Ok(existing)

            fields: dict = dict(patch.values)
            spec = patch.coordinate_spec(existing)
            if spec is not None:
                point = await self._resolve(spec)
                if point is None:
                    logger.info("Location %s not updated: address did not geocode", location_id)
                    return Err(ErrorKind.GEOCODING, UPDATE_GEOCODE_MESSAGE)
                fields["latitude"] = point.latitude
                fields["longitude"] = point.longitude

            location = await self._locations.update(location_id, fields)
            if location is None:
                # Removed between the lookup and the write
                return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

            logger.info("Location %s updated (%s)", location_id, ", ".join(sorted(fields)))
            return Ok(location)
        except Exception:
            logger.exception("Error updating location %s", location_id)
            return Err(ErrorKind.INTERNAL, UPDATE_FAILED_MESSAGE)

    async def delete_one(self, location_id: int) -> Result[int]:
        try:
            existing = await self._locations.get_by_id(location_id)
            if existing is None:
                return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

            if not await self._locations.delete_by_id(location_id):
                return Err(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
            logger.info("Location %s deleted", location_id)
            return Ok(location_id)
        except Exception:
            logger.exception("Error deleting location %s", location_id)
            return Err(ErrorKind.INTERNAL, DELETE_FAILED_MESSAGE)

    async def delete_all_for_owner(self, shop: str) -> Result[int]:
        try:
            count = await self._locations.delete_all_by_owner(shop)
            logger.info("Deleted %d locations for shop %s", count, shop)
            return Ok(count)
        except Exception:
            logger.exception("Error deleting locations for shop %s", shop)
            return Err(ErrorKind.INTERNAL, DELETE_ALL_FAILED_MESSAGE)

    async def _resolve(self, spec: CoordinateSpec) -> GeoPoint | None:
        if isinstance(spec, GeocodeAddress):
            return await self._geocoder.geocode(spec.address.composite())
        return spec.point
