"""Port interface for location persistence."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities.location import Location


class LocationRepository(ABC):
    @abstractmethod
    async def list_by_owner(self, shop: str) -> list[Location]:
        """All locations of a shop, newest first."""
        ...

    @abstractmethod
    async def get_by_id(self, location_id: int) -> Location | None:
        ...

    @abstractmethod
    async def insert(self, location: Location) -> Location:
        """Persist a new location; the store assigns id and timestamps."""
        ...

    @abstractmethod
    async def update(self, location_id: int, fields: dict[str, Any]) -> Location | None:
        """Merge only the given fields. Returns None if the id is unknown."""
        ...

    @abstractmethod
    async def delete_by_id(self, location_id: int) -> bool:
        ...

    @abstractmethod
    async def delete_all_by_owner(self, shop: str) -> int:
        ...
