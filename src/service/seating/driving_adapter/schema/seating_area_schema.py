from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class SeatingAreaDocRequest(BaseModel):
    """Seating area document as submitted by the area form (camelCase keys)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='forbid',
        json_schema_extra={
            'example': {
                'name': 'Patio',
                'bookable': True,
                'bookableOnline': True,
                'bookingPriority': 5,
                'note': 'Heated in winter',
                'internalNote': 'Close when raining',
            }
        },
    )

    name: StrictStr
    bookable: StrictBool
    bookable_online: StrictBool
    booking_priority: StrictInt = Field(ge=1, le=10)
    note: StrictStr
    internal_note: StrictStr


class SeatingAreaCreatedResponse(BaseModel):
    id: str


class SeatingAreaUpdatedResponse(BaseModel):
    matched_count: int
    modified_count: int
    synced_booking_count: int
    synced_table_count: int


class SeatingAreaResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    restaurant_id: str
    name: str
    bookable: bool
    bookable_online: bool
    booking_priority: int
    note: str
    internal_note: str
    created_by: str
    created_at: datetime
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None
