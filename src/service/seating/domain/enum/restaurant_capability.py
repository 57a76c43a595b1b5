from enum import StrEnum


class RestaurantCapability(StrEnum):
    """Per-restaurant capabilities granted to an actor"""

    TABLES = 'tables'
    APPS = 'apps'


# Managing seating areas needs any one of these
SEATING_AREA_CAPABILITIES = frozenset({RestaurantCapability.TABLES, RestaurantCapability.APPS})
