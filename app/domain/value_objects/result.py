"""Tagged result returned by every Location Service operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from app.domain.value_objects.enums import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    error: str
    ok: bool = field(default=False, init=False)


Result = Union[Ok[T], Err]
