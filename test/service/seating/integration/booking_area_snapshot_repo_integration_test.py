"""
Integration tests for BookingAreaSnapshotRepoImpl

Selection: same restaurant, date_time strictly after `now`, non-null tables.
Only bookings holding a stale copy of the area are written.
"""

from datetime import datetime, timezone

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.seating.app.interface.i_booking_area_snapshot_repo import SnapshotSyncResult
from src.service.seating.domain.booking_area_snapshot import AreaSnapshot
from test.shared.utils import (
    booking_row,
    fetch_booking_tables,
    future,
    insert_bookings,
    past,
    table_entry,
)
from test.util_constant import AREA_ID, OTHER_AREA_ID, OTHER_RESTAURANT_ID, RESTAURANT_ID


GARDEN = AreaSnapshot(id=AREA_ID, name='Garden', internal_note='n1')


async def _sync(snapshot: AreaSnapshot, *, now: datetime | None = None) -> SnapshotSyncResult:
    async with SqlAlchemyUnitOfWork(Database().session) as uow:
        result = await uow.booking_area_snapshot_repo.sync_area_snapshot(
            restaurant_id=RESTAURANT_ID,
            snapshot=snapshot,
            now=now or datetime.now(timezone.utc),
        )
        await uow.commit()
    return result


def _area_of(tables: list, index: int = 0) -> dict:
    return tables[index]['area']


class TestSyncAreaSnapshot:
    @pytest.mark.asyncio
    async def test_future_booking_gets_new_name(self) -> None:
        """
        Given: a future booking whose table embeds {id: A1, name: Patio, internalNote: n1}
        When: A1 is synced as Garden
        Then: the embedded copy reads {id: A1, name: Garden, internalNote: n1}
        """
        await insert_bookings([booking_row('b1', date_time=future(), tables=[table_entry('1')])])

        result = await _sync(GARDEN)

        stored = await fetch_booking_tables()
        assert _area_of(stored['b1']) == {'id': AREA_ID, 'name': 'Garden', 'internalNote': 'n1'}
        assert result == SnapshotSyncResult(booking_count=1, table_count=1)

    @pytest.mark.asyncio
    async def test_past_booking_is_untouched(self) -> None:
        await insert_bookings([booking_row('b1', date_time=past(), tables=[table_entry('1')])])

        result = await _sync(GARDEN)

        stored = await fetch_booking_tables()
        assert _area_of(stored['b1']) == {'id': AREA_ID, 'name': 'Patio', 'internalNote': 'n1'}
        assert result.booking_count == 0

    @pytest.mark.asyncio
    async def test_booking_exactly_at_now_is_untouched(self) -> None:
        now = datetime(2030, 1, 1, 19, 0, tzinfo=timezone.utc)
        await insert_bookings([booking_row('b1', date_time=now, tables=[table_entry('1')])])

        result = await _sync(GARDEN, now=now)

        assert result.booking_count == 0

    @pytest.mark.asyncio
    async def test_other_area_is_untouched_regardless_of_date(self) -> None:
        other_area_tables = [table_entry('1', area_id=OTHER_AREA_ID)]
        await insert_bookings(
            [
                booking_row('b1', date_time=future(), tables=other_area_tables),
                booking_row('b2', date_time=past(), tables=other_area_tables),
            ]
        )

        result = await _sync(GARDEN)

        stored = await fetch_booking_tables()
        assert _area_of(stored['b1'])['name'] == 'Patio'
        assert _area_of(stored['b2'])['name'] == 'Patio'
        assert result.booking_count == 0

    @pytest.mark.asyncio
    async def test_other_restaurant_is_untouched(self) -> None:
        await insert_bookings(
            [
                booking_row(
                    'b1',
                    date_time=future(),
                    tables=[table_entry('1')],
                    restaurant_id=OTHER_RESTAURANT_ID,
                )
            ]
        )

        await _sync(GARDEN)

        stored = await fetch_booking_tables()
        assert _area_of(stored['b1'])['name'] == 'Patio'

    @pytest.mark.asyncio
    async def test_bookings_without_tables_or_area_are_untouched(self) -> None:
        await insert_bookings(
            [
                booking_row('b1', date_time=future(), tables=None),
                booking_row('b2', date_time=future(), tables=[]),
                booking_row('b3', date_time=future(), tables=[table_entry('1', area_id=None)]),
            ]
        )

        result = await _sync(GARDEN)

        stored = await fetch_booking_tables()
        assert stored['b1'] is None
        assert stored['b2'] == []
        assert 'area' not in stored['b3'][0]
        assert result == SnapshotSyncResult(booking_count=0, table_count=0)

    @pytest.mark.asyncio
    async def test_all_stale_entries_of_all_bookings_are_refreshed(self) -> None:
        # Given
        await insert_bookings(
            [
                booking_row(
                    'b1',
                    date_time=future(1),
                    tables=[
                        table_entry('1'),
                        table_entry('2', area_id=OTHER_AREA_ID),
                        table_entry('3', internal_note='old'),
                    ],
                ),
                booking_row('b2', date_time=future(2), tables=[table_entry('7')]),
                booking_row('b3', date_time=future(3), tables=[table_entry('8', name='Garden')]),
            ]
        )

        # When
        result = await _sync(GARDEN)

        # Then
        stored = await fetch_booking_tables()
        assert [entry['area']['name'] for entry in stored['b1']] == ['Garden', 'Patio', 'Garden']
        assert stored['b1'][2]['area']['internalNote'] == 'n1'
        assert [entry['tableId'] for entry in stored['b1']] == ['1', '2', '3']
        assert _area_of(stored['b2'])['name'] == 'Garden'
        assert _area_of(stored['b3'])['name'] == 'Garden'
        assert result == SnapshotSyncResult(booking_count=2, table_count=3)

    @pytest.mark.asyncio
    async def test_second_sync_writes_nothing(self) -> None:
        await insert_bookings([booking_row('b1', date_time=future(), tables=[table_entry('1')])])

        first = await _sync(GARDEN)
        second = await _sync(GARDEN)

        assert first.table_count == 1
        assert second == SnapshotSyncResult(booking_count=0, table_count=0)

    @pytest.mark.asyncio
    async def test_no_bookings_is_a_no_op(self) -> None:
        assert await _sync(GARDEN) == SnapshotSyncResult(booking_count=0, table_count=0)
