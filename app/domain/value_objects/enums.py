"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    GEOCODING = "geocoding"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class CoordinateSource(str, Enum):
    GEOCODED = "geocoded"
    MANUAL = "manual"
