"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.seating.driven_adapter.model.booking_model import BookingModel
from src.service.seating.driven_adapter.model.seating_area_model import SeatingAreaModel

__all__ = [
    'BookingModel',
    'SeatingAreaModel',
]
