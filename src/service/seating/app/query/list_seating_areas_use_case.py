from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seating_area_query_repo import ISeatingAreaQueryRepo
from src.service.seating.domain.entity.seating_area_entity import SeatingArea


class ListSeatingAreasUseCase:
    def __init__(self, seating_area_query_repo: ISeatingAreaQueryRepo) -> None:
        self.seating_area_query_repo = seating_area_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seating_area_query_repo: ISeatingAreaQueryRepo = Depends(
            Provide[Container.seating_area_query_repo]
        ),
    ) -> Self:
        return cls(seating_area_query_repo=seating_area_query_repo)

    @Logger.io
    async def execute(self, *, restaurant_id: str) -> List[SeatingArea]:
        return await self.seating_area_query_repo.list_by_restaurant(restaurant_id=restaurant_id)
