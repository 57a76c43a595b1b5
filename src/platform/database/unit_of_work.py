"""
Unit of Work Pattern - one database session and transaction per use-case call

Architecture:
- UoW opens the session on enter and closes it on exit
- UoW is responsible for commit/rollback
- Repositories created by the UoW share its session
- Use cases coordinate the seating-area write and the booking sync through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.seating.app.interface.i_booking_area_snapshot_repo import (
        IBookingAreaSnapshotRepo,
    )
    from src.service.seating.app.interface.i_seating_area_command_repo import (
        ISeatingAreaCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Seating Service

    Usage:
        async with uow:
            matched = await uow.seating_area_command_repo.update(...)
            await uow.booking_area_snapshot_repo.sync_area_snapshot(...)
            await uow.commit()
    """

    seating_area_command_repo: ISeatingAreaCommandRepo
    booking_area_snapshot_repo: IBookingAreaSnapshotRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        # Anything not committed explicitly is discarded
        await self.rollback()

    async def commit(self):
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self._session_factory = session_factory
        self._session_cm: AbstractAsyncContextManager[AsyncSession] | None = None
        self.session: AsyncSession | None = None

    async def __aenter__(self):
        from src.service.seating.driven_adapter.repo.booking_area_snapshot_repo_impl import (
            BookingAreaSnapshotRepoImpl,
        )
        from src.service.seating.driven_adapter.repo.seating_area_command_repo_impl import (
            SeatingAreaCommandRepoImpl,
        )

        self._session_cm = self._session_factory()
        self.session = await self._session_cm.__aenter__()

        self.seating_area_command_repo = SeatingAreaCommandRepoImpl(session=self.session)
        self.booking_area_snapshot_repo = BookingAreaSnapshotRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            session_cm, self._session_cm, self.session = self._session_cm, None, None
            if session_cm is not None:
                await session_cm.__aexit__(*args)

    async def _commit(self):
        assert self.session is not None, 'UnitOfWork used outside of `async with`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
