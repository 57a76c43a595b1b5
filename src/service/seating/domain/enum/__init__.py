"""Seating Domain Enums"""

from src.service.seating.domain.enum.restaurant_capability import (
    SEATING_AREA_CAPABILITIES,
    RestaurantCapability,
)

__all__ = ['SEATING_AREA_CAPABILITIES', 'RestaurantCapability']
