"""
Unit tests for InsertSeatingAreaUseCase

Flow: rate limit (per actor) -> validate doc -> create row -> commit
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.platform.exception.exceptions import (
    PersistenceError,
    RateLimitExceededError,
    ValidationError,
)
from src.service.seating.app.command.insert_seating_area_use_case import InsertSeatingAreaUseCase
from src.service.seating.domain.entity.seating_area_entity import SeatingArea
from test.service.seating.unit.fake_unit_of_work import FakeUnitOfWork
from test.util_constant import ACTOR_ID, RESTAURANT_ID, VALID_AREA_DOC


@pytest.mark.unit
class TestInsertSeatingArea:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        return FakeUnitOfWork()

    @pytest.fixture
    def rate_limiter(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def use_case(self, uow: FakeUnitOfWork, rate_limiter: MagicMock) -> InsertSeatingAreaUseCase:
        return InsertSeatingAreaUseCase(uow=uow, rate_limiter=rate_limiter)

    @pytest.mark.asyncio
    async def test_creates_area_stamped_with_actor_and_time(
        self, use_case: InsertSeatingAreaUseCase, uow: FakeUnitOfWork
    ) -> None:
        # Given
        before = datetime.now(timezone.utc)

        # When
        area_id = await use_case.execute(
            restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID
        )

        # Then
        uow.seating_area_command_repo.create.assert_awaited_once()
        created: SeatingArea = uow.seating_area_command_repo.create.call_args.kwargs[
            'seating_area'
        ]
        assert created.id == area_id
        assert created.restaurant_id == RESTAURANT_ID
        assert created.name == 'Patio'
        assert created.booking_priority == 5
        assert created.internal_note == 'n1'
        assert created.created_by == ACTOR_ID
        assert before <= created.created_at <= datetime.now(timezone.utc)
        assert created.updated_by is None
        assert created.updated_at is None
        assert uow.committed

    @pytest.mark.asyncio
    async def test_generates_distinct_ids(self, use_case: InsertSeatingAreaUseCase) -> None:
        first = await use_case.execute(
            restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID
        )
        second = await use_case.execute(
            restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID
        )

        assert first != second

    @pytest.mark.asyncio
    async def test_non_numeric_priority_fails_before_any_write(
        self, use_case: InsertSeatingAreaUseCase, uow: FakeUnitOfWork
    ) -> None:
        with pytest.raises(ValidationError):
            await use_case.execute(
                restaurant_id=RESTAURANT_ID,
                doc={**VALID_AREA_DOC, 'bookingPriority': 'high'},
                actor_id=ACTOR_ID,
            )

        uow.seating_area_command_repo.create.assert_not_awaited()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_empty_restaurant_id_is_rejected(
        self, use_case: InsertSeatingAreaUseCase, uow: FakeUnitOfWork
    ) -> None:
        with pytest.raises(ValidationError):
            await use_case.execute(restaurant_id='', doc=VALID_AREA_DOC, actor_id=ACTOR_ID)

        uow.seating_area_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rate_limit_is_keyed_by_actor(
        self, use_case: InsertSeatingAreaUseCase, rate_limiter: MagicMock
    ) -> None:
        await use_case.execute(restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID)

        rate_limiter.hit.assert_called_once_with(key=ACTOR_ID)

    @pytest.mark.asyncio
    async def test_rate_limited_call_writes_nothing(
        self, use_case: InsertSeatingAreaUseCase, rate_limiter: MagicMock, uow: FakeUnitOfWork
    ) -> None:
        rate_limiter.hit.side_effect = RateLimitExceededError('Too many', retry_after_ms=300)

        with pytest.raises(RateLimitExceededError):
            await use_case.execute(
                restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID
            )

        uow.seating_area_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_failure_is_wrapped_with_context(
        self, use_case: InsertSeatingAreaUseCase, uow: FakeUnitOfWork
    ) -> None:
        # Given
        uow.seating_area_command_repo.create.side_effect = OperationalError(
            'INSERT INTO seating_area', {}, Exception('disk I/O error')
        )

        # When
        with pytest.raises(PersistenceError) as exc_info:
            await use_case.execute(
                restaurant_id=RESTAURANT_ID, doc=VALID_AREA_DOC, actor_id=ACTOR_ID
            )

        # Then
        error = exc_info.value
        assert error.kind == 'persistence'
        assert error.restaurant_id == RESTAURANT_ID
        assert error.actor_id == ACTOR_ID
        assert 'disk I/O error' in error.detail
        assert 'disk I/O error' not in error.message
        assert not uow.committed
        assert uow.rolled_back
