from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.seating.domain.entity.seating_area_entity import SeatingArea


class ISeatingAreaQueryRepo(ABC):
    """Repository interface for seating area read operations"""

    @abstractmethod
    async def get_by_id(
        self, *, restaurant_id: str, seating_area_id: str
    ) -> Optional[SeatingArea]:
        pass

    @abstractmethod
    async def list_by_restaurant(self, *, restaurant_id: str) -> List[SeatingArea]:
        """Areas of the restaurant ordered by booking priority (desc) then name"""
        pass
