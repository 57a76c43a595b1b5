from typing import Any

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.seating.domain.entity.seating_area_entity import SeatingAreaInput
from test.util_constant import VALID_AREA_DOC


def _doc(**overrides: Any) -> dict[str, Any]:
    return {**VALID_AREA_DOC, **overrides}


@pytest.mark.unit
class TestSeatingAreaInputFromDoc:
    def test_valid_doc_maps_camel_case_fields(self) -> None:
        area_input = SeatingAreaInput.from_doc(_doc())

        assert area_input == SeatingAreaInput(
            name='Patio',
            bookable=True,
            bookable_online=True,
            booking_priority=5,
            note='Heated in winter',
            internal_note='n1',
        )

    @pytest.mark.parametrize('missing_key', list(VALID_AREA_DOC))
    def test_missing_field_is_rejected(self, missing_key: str) -> None:
        doc = _doc()
        del doc[missing_key]

        with pytest.raises(ValidationError) as exc_info:
            SeatingAreaInput.from_doc(doc)

        assert exc_info.value.field == missing_key
        assert exc_info.value.kind == 'validation'

    @pytest.mark.parametrize(
        'key, value',
        [
            ('name', 42),
            ('bookable', 'yes'),
            ('bookableOnline', 1),
            ('bookingPriority', 'high'),
            ('bookingPriority', '5'),
            ('bookingPriority', 5.0),
            ('bookingPriority', True),
            ('note', None),
            ('internalNote', ['n1']),
        ],
    )
    def test_wrong_type_is_rejected(self, key: str, value: Any) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SeatingAreaInput.from_doc(_doc(**{key: value}))

        assert exc_info.value.field == key

    @pytest.mark.parametrize('priority', [0, 11, -1])
    def test_priority_outside_1_to_10_is_rejected(self, priority: int) -> None:
        with pytest.raises(ValidationError, match='bookingPriority'):
            SeatingAreaInput.from_doc(_doc(bookingPriority=priority))

    @pytest.mark.parametrize('priority', [1, 10])
    def test_priority_bounds_are_accepted(self, priority: int) -> None:
        assert SeatingAreaInput.from_doc(_doc(bookingPriority=priority)).booking_priority == priority

    @pytest.mark.parametrize('name', ['', '   '])
    def test_blank_name_is_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError, match='name'):
            SeatingAreaInput.from_doc(_doc(name=name))

    def test_unknown_key_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SeatingAreaInput.from_doc(_doc(restaurantId='restaurant-2'))

        assert exc_info.value.field == 'restaurantId'

    @pytest.mark.parametrize('doc', [None, 'Patio', ['Patio']])
    def test_non_object_doc_is_rejected(self, doc: Any) -> None:
        with pytest.raises(ValidationError):
            SeatingAreaInput.from_doc(doc)

    def test_not_bookable_forces_bookable_online_off(self) -> None:
        area_input = SeatingAreaInput.from_doc(_doc(bookable=False, bookableOnline=True))

        assert area_input.bookable is False
        assert area_input.bookable_online is False

    def test_bookable_keeps_submitted_bookable_online(self) -> None:
        area_input = SeatingAreaInput.from_doc(_doc(bookable=True, bookableOnline=False))

        assert area_input.bookable_online is False

    def test_empty_notes_are_allowed(self) -> None:
        area_input = SeatingAreaInput.from_doc(_doc(note='', internalNote=''))

        assert area_input.note == ''
        assert area_input.internal_note == ''
