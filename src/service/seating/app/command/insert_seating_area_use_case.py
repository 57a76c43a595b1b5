from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
import uuid_utils

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import PersistenceError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.types.utc_datetime import utc_now
from src.service.seating.app.interface.i_rate_limiter import IRateLimiter
from src.service.seating.domain.entity.seating_area_entity import SeatingArea, SeatingAreaInput


class InsertSeatingAreaUseCase:
    """
    Create a seating area for a restaurant.

    The caller must already hold access to the restaurant. Calls are rate
    limited per actor, then the document is validated before anything is written.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, rate_limiter: IRateLimiter) -> None:
        self.uow = uow
        self.rate_limiter = rate_limiter

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        rate_limiter: IRateLimiter = Depends(Provide[Container.seating_area_insert_rate_limiter]),
    ) -> Self:
        return cls(uow=uow, rate_limiter=rate_limiter)

    @Logger.io
    async def execute(self, *, restaurant_id: str, doc: Any, actor_id: str) -> str:
        if not restaurant_id:
            raise ValidationError('restaurantId must not be empty', field='restaurantId')
        self.rate_limiter.hit(key=actor_id)
        area_input = SeatingAreaInput.from_doc(doc)

        seating_area = SeatingArea.create(
            id=str(uuid_utils.uuid7()),
            restaurant_id=restaurant_id,
            area_input=area_input,
            actor_id=actor_id,
            now=utc_now(),
        )

        try:
            async with self.uow:
                await self.uow.seating_area_command_repo.create(seating_area=seating_area)
                await self.uow.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(
                'Failed to insert seating area',
                restaurant_id=restaurant_id,
                actor_id=actor_id,
                detail=str(e),
            ) from e

        Logger.base.info(
            f'🪑 [SEATING_AREA] Created {seating_area.id} for restaurant {restaurant_id}'
        )
        return seating_area.id
