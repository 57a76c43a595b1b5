"""
Booking Area Snapshot Repository - keeps `booking.tables[].area` in sync with seating areas

One SELECT ... FOR UPDATE over the restaurant's future bookings, patch the JSON
in memory, then one bulk UPDATE-by-primary-key (executemany) for the bookings
whose tables actually changed.
"""

from datetime import datetime
from typing import Any

from opentelemetry import trace
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_booking_area_snapshot_repo import (
    IBookingAreaSnapshotRepo,
    SnapshotSyncResult,
)
from src.service.seating.domain.booking_area_snapshot import AreaSnapshot, refresh_area_snapshots
from src.service.seating.driven_adapter.model.booking_model import BookingModel


class BookingAreaSnapshotRepoImpl(IBookingAreaSnapshotRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def sync_area_snapshot(
        self, *, restaurant_id: str, snapshot: AreaSnapshot, now: datetime
    ) -> SnapshotSyncResult:
        with self.tracer.start_as_current_span(
            'repo.sync_area_snapshot',
            attributes={
                'restaurant.id': restaurant_id,
                'seating_area.id': snapshot.id,
            },
        ) as span:
            rows = await self.session.execute(
                select(BookingModel.id, BookingModel.tables)
                .where(
                    BookingModel.restaurant_id == restaurant_id,
                    BookingModel.date_time > now,
                    BookingModel.tables.is_not(None),
                )
                .with_for_update()
            )

            changes: list[dict[str, Any]] = []
            table_count = 0
            for booking_id, tables in rows.all():
                if not tables:
                    continue
                refresh = refresh_area_snapshots(tables, snapshot)
                if not refresh.changed:
                    continue
                changes.append({'id': booking_id, 'tables': refresh.tables})
                table_count += refresh.changed_table_count

            if changes:
                # ORM bulk UPDATE by primary key, sent as a single executemany
                await self.session.execute(update(BookingModel), changes)

            span.set_attribute('booking.synced_count', len(changes))
            span.set_attribute('booking.synced_table_count', table_count)

        Logger.base.info(
            f'🔁 [SYNC] area {snapshot.id} of restaurant {restaurant_id}: '
            f'{len(changes)} booking(s), {table_count} table entrie(s) refreshed'
        )
        return SnapshotSyncResult(booking_count=len(changes), table_count=table_count)
