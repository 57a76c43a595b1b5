from abc import ABC, abstractmethod
from datetime import datetime

import attrs

from src.service.seating.domain.booking_area_snapshot import AreaSnapshot


@attrs.define(frozen=True)
class SnapshotSyncResult:
    booking_count: int = 0
    table_count: int = 0


class IBookingAreaSnapshotRepo(ABC):
    @abstractmethod
    async def sync_area_snapshot(
        self, *, restaurant_id: str, snapshot: AreaSnapshot, now: datetime
    ) -> SnapshotSyncResult:
        """
        Refresh the embedded area snapshot on every booking of the restaurant
        dated strictly after `now`. Only bookings holding a stale copy are written,
        all of them in a single bulk statement.
        """
        pass
