from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.platform.types.utc_datetime import UTCDateTime


class SeatingAreaModel(Base):
    __tablename__ = 'seating_area'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    restaurant_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bookable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    bookable_online: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    booking_priority: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    note: Mapped[str] = mapped_column(Text, nullable=False, default='')
    internal_note: Mapped[str] = mapped_column(Text, nullable=False, default='')
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (Index('ix_seating_area_restaurant_id', 'restaurant_id'),)
