from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seating_area_query_repo import ISeatingAreaQueryRepo
from src.service.seating.domain.entity.seating_area_entity import SeatingArea
from src.service.seating.driven_adapter.model.seating_area_model import SeatingAreaModel


class SeatingAreaQueryRepoImpl(ISeatingAreaQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """Open a session from the factory for a single query"""
        async with self.session_factory() as session:
            yield session

    @staticmethod
    def _to_entity(db_area: SeatingAreaModel) -> SeatingArea:
        return SeatingArea(
            id=db_area.id,
            restaurant_id=db_area.restaurant_id,
            name=db_area.name,
            bookable=db_area.bookable,
            bookable_online=db_area.bookable_online,
            booking_priority=db_area.booking_priority,
            note=db_area.note,
            internal_note=db_area.internal_note,
            created_by=db_area.created_by,
            created_at=db_area.created_at,
            updated_by=db_area.updated_by,
            updated_at=db_area.updated_at,
        )

    @Logger.io
    async def get_by_id(
        self, *, restaurant_id: str, seating_area_id: str
    ) -> Optional[SeatingArea]:
        async with self._get_session() as session:
            result = await session.execute(
                select(SeatingAreaModel).where(
                    SeatingAreaModel.id == seating_area_id,
                    SeatingAreaModel.restaurant_id == restaurant_id,
                )
            )
            db_area = result.scalar_one_or_none()

        if not db_area:
            return None
        return self._to_entity(db_area)

    @Logger.io
    async def list_by_restaurant(self, *, restaurant_id: str) -> List[SeatingArea]:
        async with self._get_session() as session:
            result = await session.execute(
                select(SeatingAreaModel)
                .where(SeatingAreaModel.restaurant_id == restaurant_id)
                .order_by(
                    SeatingAreaModel.booking_priority.desc(),
                    SeatingAreaModel.name,
                    SeatingAreaModel.id,
                )
            )
            db_areas = result.scalars().all()

        return [self._to_entity(db_area) for db_area in db_areas]
