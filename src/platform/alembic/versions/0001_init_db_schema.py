"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- seating_area: Seating areas (zones of a restaurant floor plan)
- booking: Bookings with their table assignments; each entry of `tables` may
  embed an area snapshot {"id", "name", "internalNote"}
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    # Seating area table
    op.create_table(
        'seating_area',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('restaurant_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('bookable', sa.Boolean(), nullable=False),
        sa.Column('bookable_online', sa.Boolean(), nullable=False),
        sa.Column('booking_priority', sa.Integer(), nullable=False),
        sa.Column('note', sa.Text(), nullable=False),
        sa.Column('internal_note', sa.Text(), nullable=False),
        sa.Column('created_by', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_by', sa.String(length=64), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_seating_area_restaurant_id', 'seating_area', ['restaurant_id'])

    # Booking table (only the columns the seating service reads/writes)
    op.create_table(
        'booking',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('restaurant_id', sa.String(length=64), nullable=False),
        sa.Column('date_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('tables', JSONB(none_as_null=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_booking_restaurant_id_date_time', 'booking', ['restaurant_id', 'date_time']
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index('ix_booking_restaurant_id_date_time', table_name='booking')
    op.drop_table('booking')
    op.drop_index('ix_seating_area_restaurant_id', table_name='seating_area')
    op.drop_table('seating_area')
