"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seating.app.command import (
    insert_seating_area_use_case,
    update_seating_area_use_case,
)
from src.service.seating.app.query import (
    get_seating_area_use_case,
    list_seating_areas_use_case,
)
from src.service.seating.driving_adapter.http_controller.auth import restaurant_access


WIRE_MODULES: list[ModuleType] = [
    insert_seating_area_use_case,
    update_seating_area_use_case,
    get_seating_area_use_case,
    list_seating_areas_use_case,
    restaurant_access,
]
