"""
Booking area snapshot - denormalized copy of a seating area kept on booking tables

A booking's `tables` is an ordered list of table assignments. An entry may carry
an embedded `area` snapshot `{id, name, internalNote}` copied from the seating
area at assignment time. When the area changes, future bookings must show the
current name/internalNote; past bookings keep their historical copy.
"""

from typing import Any, Mapping, Sequence

import attrs

from src.service.seating.domain.entity.seating_area_entity import SeatingAreaInput


@attrs.define(frozen=True)
class AreaSnapshot:
    id: str
    name: str
    internal_note: str

    @classmethod
    def of(cls, *, seating_area_id: str, area_input: SeatingAreaInput) -> 'AreaSnapshot':
        return cls(id=seating_area_id, name=area_input.name, internal_note=area_input.internal_note)

    def matches(self, embedded: Any) -> bool:
        return isinstance(embedded, Mapping) and embedded.get('id') == self.id

    def is_stale(self, embedded: Mapping[str, Any]) -> bool:
        return (
            embedded.get('name') != self.name or embedded.get('internalNote') != self.internal_note
        )


@attrs.define(frozen=True)
class SnapshotRefresh:
    tables: list[Any]
    changed_table_count: int

    @property
    def changed(self) -> bool:
        return self.changed_table_count > 0


def refresh_area_snapshots(tables: Sequence[Any], snapshot: AreaSnapshot) -> SnapshotRefresh:
    """
    Rewrite every stale embedded copy of `snapshot`'s area in one booking's tables.

    Entries without an `area`, entries for another area, and entries already
    consistent are returned as-is. The input sequence is never mutated.
    """
    refreshed: list[Any] = []
    changed = 0
    for entry in tables:
        area = entry.get('area') if isinstance(entry, Mapping) else None
        if not snapshot.matches(area) or not snapshot.is_stale(area):
            refreshed.append(entry)
            continue
        refreshed.append(
            {
                **entry,
                'area': {**area, 'name': snapshot.name, 'internalNote': snapshot.internal_note},
            }
        )
        changed += 1
    return SnapshotRefresh(tables=refreshed, changed_table_count=changed)
