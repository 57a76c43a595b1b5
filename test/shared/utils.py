from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy import insert, select

from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    drop_db_and_tables,
    get_engine,
)
from src.service.seating.driven_adapter.model.booking_model import BookingModel
from test.util_constant import AREA_ID, RESTAURANT_ID


def future(days: int = 1) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


def past(days: int = 1) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


def table_entry(
    table_id: str,
    *,
    area_id: str | None = AREA_ID,
    name: str = 'Patio',
    internal_note: str = 'n1',
) -> dict[str, Any]:
    """One `booking.tables` entry; `area_id=None` gives an entry without an area"""
    entry: dict[str, Any] = {'tableId': table_id, 'name': f'T{table_id}', 'seats': 4}
    if area_id is not None:
        entry['area'] = {'id': area_id, 'name': name, 'internalNote': internal_note}
    return entry


def booking_row(
    booking_id: str,
    *,
    date_time: datetime,
    tables: list[dict[str, Any]] | None,
    restaurant_id: str = RESTAURANT_ID,
) -> dict[str, Any]:
    return {
        'id': booking_id,
        'restaurant_id': restaurant_id,
        'date_time': date_time,
        'tables': tables,
    }


async def reset_tables() -> None:
    try:
        await drop_db_and_tables()
        await create_db_and_tables()
    finally:
        await dispose_engine()


async def insert_bookings(rows: list[dict[str, Any]]) -> None:
    try:
        async with get_engine().begin() as conn:
            await conn.execute(insert(BookingModel), rows)
    finally:
        await dispose_engine()


async def fetch_booking_tables() -> dict[str, Any]:
    """booking id -> stored `tables` JSON"""
    try:
        async with get_engine().connect() as conn:
            result = await conn.execute(select(BookingModel.id, BookingModel.tables))
            return {booking_id: tables for booking_id, tables in result.all()}
    finally:
        await dispose_engine()
