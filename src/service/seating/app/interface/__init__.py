"""Application layer interfaces (Ports)"""

from src.service.seating.app.interface.i_booking_area_snapshot_repo import (
    IBookingAreaSnapshotRepo,
    SnapshotSyncResult,
)
from src.service.seating.app.interface.i_rate_limiter import IRateLimiter
from src.service.seating.app.interface.i_seating_area_command_repo import (
    ISeatingAreaCommandRepo,
)
from src.service.seating.app.interface.i_seating_area_query_repo import ISeatingAreaQueryRepo

__all__ = [
    'IBookingAreaSnapshotRepo',
    'IRateLimiter',
    'ISeatingAreaCommandRepo',
    'ISeatingAreaQueryRepo',
    'SnapshotSyncResult',
]
