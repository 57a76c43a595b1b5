from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Index, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.platform.types.utc_datetime import UTCDateTime


# JSONB on PostgreSQL, generic JSON elsewhere (SQLite in tests)
TablesJSON = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), 'postgresql')


class BookingModel(Base):
    """
    Booking row as far as the seating service is concerned.

    Only the fields needed to keep `tables[].area` snapshots in sync are mapped;
    the booking itself is owned by the reservation side of the application.
    """

    __tablename__ = 'booking'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    restaurant_id: Mapped[str] = mapped_column(String(64), nullable=False)
    date_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    tables: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(TablesJSON, nullable=True)

    __table_args__ = (Index('ix_booking_restaurant_id_date_time', 'restaurant_id', 'date_time'),)
