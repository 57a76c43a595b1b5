from abc import ABC, abstractmethod
from datetime import datetime

from src.service.seating.domain.entity.seating_area_entity import SeatingArea, SeatingAreaInput


class ISeatingAreaCommandRepo(ABC):
    """Repository interface for seating area write operations"""

    @abstractmethod
    async def create(self, *, seating_area: SeatingArea) -> SeatingArea:
        pass

    @abstractmethod
    async def update(
        self,
        *,
        restaurant_id: str,
        seating_area_id: str,
        area_input: SeatingAreaInput,
        actor_id: str,
        now: datetime,
    ) -> int:
        """Replace the mutable fields of the restaurant's area; returns the matched row count"""
        pass
