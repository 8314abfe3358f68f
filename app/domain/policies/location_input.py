"""Validated location input — create payloads, partial updates, coordinate source.

Coordinates for a location come from exactly one of two branches:

* ``GeocodeAddress`` — resolve the composite address through the geocoder.
* ``ManualCoordinates`` — caller-supplied latitude/longitude, stored verbatim.

Building a ``NewLocation`` or ``LocationPatch`` performs all input validation,
so the service only ever sees well-formed values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from app.domain.entities.location import Location
from app.domain.value_objects.enums import CoordinateSource, ErrorKind
from app.domain.value_objects.geo_point import GeoPoint
from app.domain.value_objects.result import Err, Ok, Result

REQUIRED_FIELDS_MESSAGE = "Name, address, city, and country are required fields."
REQUIRED_NOT_BLANK_MESSAGE = "Name, address, city, and country cannot be empty."
MANUAL_COORDINATES_MESSAGE = "Latitude and longitude must be numeric when using manual coordinates."
OWNER_REQUIRED_MESSAGE = "Shop is required."

ADDRESS_KEYS = ("address", "city", "country")
REQUIRED_KEYS = ("name",) + ADDRESS_KEYS
OPTIONAL_KEYS = ("zip_code", "phone")

# Column widths of the locations table
MAX_LENGTHS = {
    "shop": 255,
    "name": 255,
    "address": 500,
    "city": 200,
    "country": 100,
    "zip_code": 20,
    "phone": 50,
}


class LocationInputError(ValueError):
    """Raised when location input fails validation."""


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _check_length(key: str, value: str | None) -> None:
    limit = MAX_LENGTHS[key]
    if value is not None and len(value) > limit:
        raise LocationInputError(f"{key.replace('_', ' ').capitalize()} must be at most {limit} characters.")


@dataclass(frozen=True)
class AddressFields:
    address: str
    city: str
    country: str

    def composite(self) -> str:
        """Free-text query sent to the geocoder."""
        return f"{self.address}, {self.city}, {self.country}"


@dataclass(frozen=True)
class GeocodeAddress:
    address: AddressFields
    source: CoordinateSource = field(default=CoordinateSource.GEOCODED, init=False)


@dataclass(frozen=True)
class ManualCoordinates:
    point: GeoPoint
    source: CoordinateSource = field(default=CoordinateSource.MANUAL, init=False)

    @classmethod
    def parse(cls, latitude: Any, longitude: Any) -> "ManualCoordinates":
        if latitude is None or longitude is None or isinstance(latitude, bool) or isinstance(longitude, bool):
            raise LocationInputError(MANUAL_COORDINATES_MESSAGE)
        try:
            return cls(point=GeoPoint.parse(latitude, longitude))
        except (TypeError, ValueError) as e:
            raise LocationInputError(MANUAL_COORDINATES_MESSAGE) from e


CoordinateSpec = Union[GeocodeAddress, ManualCoordinates]


@dataclass(frozen=True)
class NewLocation:
    shop: str
    name: str
    address: AddressFields
    coordinates: CoordinateSpec
    zip_code: str | None = None
    phone: str | None = None

    @classmethod
    def from_raw(
        cls,
        shop: Any,
        name: Any,
        address: Any,
        city: Any,
        country: Any,
        zip_code: Any = None,
        phone: Any = None,
        latitude: Any = None,
        longitude: Any = None,
        manual_coordinates: bool = False,
    ) -> "NewLocation":
        """Validate raw create input.

        All of name/address/city/country must be non-empty after trimming.
        With ``manual_coordinates`` set, latitude/longitude must be numeric
        and the geocoder is bypassed.
        """
        owner = _clean(shop)
        if owner is None:
            raise LocationInputError(OWNER_REQUIRED_MESSAGE)

        cleaned = {key: _clean(value) for key, value in zip(REQUIRED_KEYS, (name, address, city, country))}
        if any(value is None for value in cleaned.values()):
            raise LocationInputError(REQUIRED_FIELDS_MESSAGE)

        optional = {"zip_code": _clean(zip_code), "phone": _clean(phone)}
        for key, value in {"shop": owner, **cleaned, **optional}.items():
            _check_length(key, value)

        fields = AddressFields(
            address=cleaned["address"],
            city=cleaned["city"],
            country=cleaned["country"],
        )
        coordinates: CoordinateSpec
        if manual_coordinates:
            coordinates = ManualCoordinates.parse(latitude, longitude)
        else:
            coordinates = GeocodeAddress(address=fields)

        return cls(
            shop=owner,
            name=cleaned["name"],
            address=fields,
            coordinates=coordinates,
            zip_code=optional["zip_code"],
            phone=optional["phone"],
        )


@dataclass(frozen=True)
class LocationPatch:
    """Partial update: only the keys present in ``values`` are written."""

    values: dict[str, str | None]
    manual: ManualCoordinates | None = None

    @classmethod
    def from_raw(
        cls,
        values: dict[str, Any],
        latitude: Any = None,
        longitude: Any = None,
        manual_coordinates: bool = False,
    ) -> "LocationPatch":
        cleaned: dict[str, str | None] = {}
        for key in REQUIRED_KEYS:
            if key in values:
                value = _clean(values[key])
                if value is None:
                    raise LocationInputError(REQUIRED_NOT_BLANK_MESSAGE)
                cleaned[key] = value
        for key in OPTIONAL_KEYS:
            if key in values:
                cleaned[key] = _clean(values[key])
        for key, value in cleaned.items():
            _check_length(key, value)

        manual = ManualCoordinates.parse(latitude, longitude) if manual_coordinates else None
        return cls(values=cleaned, manual=manual)

    def touches_address(self) -> bool:
        return any(key in self.values for key in ADDRESS_KEYS)

    def merged_address(self, existing: Location) -> AddressFields:
        """New value where supplied, stored value otherwise."""
        return AddressFields(
            address=self.values.get("address") or existing.address,
            city=self.values.get("city") or existing.city,
            country=self.values.get("country") or existing.country,
        )

    def coordinate_spec(self, existing: Location) -> CoordinateSpec | None:
        """How the patch resolves coordinates; None keeps the stored pair."""
        if self.manual is not None:
            return self.manual
        if self.touches_address():
            return GeocodeAddress(address=self.merged_address(existing))
        return None

    def is_empty(self) -> bool:
        return not self.values and self.manual is None


def parse_new_location(**raw: Any) -> Result[NewLocation]:
    """``NewLocation.from_raw`` with validation failures as an ``Err``."""
    try:
        return Ok(NewLocation.from_raw(**raw))
    except LocationInputError as e:
        return Err(ErrorKind.VALIDATION, str(e))


def parse_patch(values: dict[str, Any], **coordinates: Any) -> Result[LocationPatch]:
    try:
        return Ok(LocationPatch.from_raw(values, **coordinates))
    except LocationInputError as e:
        return Err(ErrorKind.VALIDATION, str(e))
