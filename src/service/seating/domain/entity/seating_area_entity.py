from datetime import datetime
from typing import Any, Mapping, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


MIN_BOOKING_PRIORITY = 1
MAX_BOOKING_PRIORITY = 10

# Wire document key -> (attribute name, expected type)
_DOC_FIELDS: dict[str, tuple[str, type]] = {
    'name': ('name', str),
    'bookable': ('bookable', bool),
    'bookableOnline': ('bookable_online', bool),
    'bookingPriority': ('booking_priority', int),
    'note': ('note', str),
    'internalNote': ('internal_note', str),
}


def _check_type(key: str, value: Any, expected: type) -> None:
    # bool is a subclass of int; `true` is not a priority
    if expected is int and isinstance(value, bool):
        raise ValidationError(f'{key} must be an integer', field=key)
    if not isinstance(value, expected):
        raise ValidationError(f'{key} must be of type {expected.__name__}', field=key)


@attrs.define(frozen=True)
class SeatingAreaInput:
    """Mutable fields of a seating area as submitted by the area form"""

    name: str
    bookable: bool
    bookable_online: bool
    booking_priority: int
    note: str
    internal_note: str

    @classmethod
    @Logger.io
    def from_doc(cls, doc: Any) -> 'SeatingAreaInput':
        """
        Validate a camelCase wire document and build the input.

        Every field is required and strictly typed; unknown keys are rejected.
        `bookableOnline` is stored as `bookable AND bookableOnline`.
        """
        if not isinstance(doc, Mapping):
            raise ValidationError('Seating area document must be an object')

        missing = [key for key in _DOC_FIELDS if key not in doc]
        if missing:
            raise ValidationError(f'Missing field(s): {", ".join(missing)}', field=missing[0])
        unknown = sorted(key for key in doc if key not in _DOC_FIELDS)
        if unknown:
            raise ValidationError(f'Unknown field(s): {", ".join(unknown)}', field=unknown[0])

        values: dict[str, Any] = {}
        for key, (attr_name, expected) in _DOC_FIELDS.items():
            _check_type(key, doc[key], expected)
            values[attr_name] = doc[key]

        if not values['name'].strip():
            raise ValidationError('name must not be empty', field='name')
        priority = values['booking_priority']
        if not MIN_BOOKING_PRIORITY <= priority <= MAX_BOOKING_PRIORITY:
            raise ValidationError(
                f'bookingPriority must be between {MIN_BOOKING_PRIORITY} and {MAX_BOOKING_PRIORITY}',
                field='bookingPriority',
            )

        values['bookable_online'] = values['bookable'] and values['bookable_online']
        return cls(**values)


@attrs.define
class SeatingArea:
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

    @classmethod
    def create(
        cls,
        *,
        id: str,
        restaurant_id: str,
        area_input: SeatingAreaInput,
        actor_id: str,
        now: datetime,
    ) -> 'SeatingArea':
        return cls(
            id=id,
            restaurant_id=restaurant_id,
            name=area_input.name,
            bookable=area_input.bookable,
            bookable_online=area_input.bookable_online,
            booking_priority=area_input.booking_priority,
            note=area_input.note,
            internal_note=area_input.internal_note,
            created_by=actor_id,
            created_at=now,
        )
