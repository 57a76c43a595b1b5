from typing import Any, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import PersistenceError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.types.utc_datetime import utc_now
from src.service.seating.domain.booking_area_snapshot import AreaSnapshot
from src.service.seating.domain.entity.seating_area_entity import SeatingAreaInput


@attrs.define(frozen=True)
class UpdateSeatingAreaResult:
    matched_count: int
    modified_count: int
    synced_booking_count: int
    synced_table_count: int


class UpdateSeatingAreaUseCase:
    """
    Replace a seating area's mutable fields and refresh its snapshot on future bookings.

    Flow (single transaction):
    1. Validate the document
    2. Update the area row scoped to (id, restaurant_id)
    3. Rewrite stale `tables[].area` copies on bookings dated after now
    4. Commit

    Matching zero areas is not an error; the sync still runs and finds
    nothing to touch. Any storage failure rolls back both steps and surfaces
    as PersistenceError.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, restaurant_id: str, seating_area_id: str, doc: Any, actor_id: str
    ) -> UpdateSeatingAreaResult:
        if not restaurant_id:
            raise ValidationError('restaurantId must not be empty', field='restaurantId')
        if not seating_area_id:
            raise ValidationError('seatingAreaId must not be empty', field='seatingAreaId')
        area_input = SeatingAreaInput.from_doc(doc)
        now = utc_now()

        try:
            async with self.uow:
                matched_count = await self.uow.seating_area_command_repo.update(
                    restaurant_id=restaurant_id,
                    seating_area_id=seating_area_id,
                    area_input=area_input,
                    actor_id=actor_id,
                    now=now,
                )
                snapshot = AreaSnapshot.of(seating_area_id=seating_area_id, area_input=area_input)
                sync_result = await self.uow.booking_area_snapshot_repo.sync_area_snapshot(
                    restaurant_id=restaurant_id,
                    snapshot=snapshot,
                    now=now,
                )
                await self.uow.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(
                'Failed to update seating area',
                restaurant_id=restaurant_id,
                actor_id=actor_id,
                seating_area_id=seating_area_id,
                detail=str(e),
            ) from e

        if not matched_count:
            Logger.base.info(
                f'🪑 [SEATING_AREA] No area {seating_area_id} for restaurant {restaurant_id}'
            )

        return UpdateSeatingAreaResult(
            matched_count=matched_count,
            # Every matched row is re-stamped with updatedBy/updatedAt
            modified_count=matched_count,
            synced_booking_count=sync_result.booking_count,
            synced_table_count=sync_result.table_count,
        )
