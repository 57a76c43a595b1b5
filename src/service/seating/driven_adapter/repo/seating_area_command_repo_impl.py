from datetime import datetime

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seating_area_command_repo import (
    ISeatingAreaCommandRepo,
)
from src.service.seating.domain.entity.seating_area_entity import SeatingArea, SeatingAreaInput
from src.service.seating.driven_adapter.model.seating_area_model import SeatingAreaModel


class SeatingAreaCommandRepoImpl(ISeatingAreaCommandRepo):
    """Seating area writes; runs on the session owned by the unit of work"""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, seating_area: SeatingArea) -> SeatingArea:
        self.session.add(
            SeatingAreaModel(
                id=seating_area.id,
                restaurant_id=seating_area.restaurant_id,
                name=seating_area.name,
                bookable=seating_area.bookable,
                bookable_online=seating_area.bookable_online,
                booking_priority=seating_area.booking_priority,
                note=seating_area.note,
                internal_note=seating_area.internal_note,
                created_by=seating_area.created_by,
                created_at=seating_area.created_at,
            )
        )
        await self.session.flush()
        return seating_area

    @Logger.io
    async def update(
        self,
        *,
        restaurant_id: str,
        seating_area_id: str,
        area_input: SeatingAreaInput,
        actor_id: str,
        now: datetime,
    ) -> int:
        # Scoped by restaurant_id so a guessed id cannot touch another tenant's area
        result = await self.session.execute(
            update(SeatingAreaModel)
            .where(
                SeatingAreaModel.id == seating_area_id,
                SeatingAreaModel.restaurant_id == restaurant_id,
            )
            .values(
                name=area_input.name,
                bookable=area_input.bookable,
                bookable_online=area_input.bookable_online,
                booking_priority=area_input.booking_priority,
                note=area_input.note,
                internal_note=area_input.internal_note,
                updated_by=actor_id,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
