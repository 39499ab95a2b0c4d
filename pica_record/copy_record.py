"""
PICA+ Copy Record

A copy record holds the level 2 fields describing one copy (exemplar) of a
title. All fields share one occurrence, the item number, which is fixed by
the first field appended.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from .errors import ChildKeyCollision, ItemNumberMismatch, PicaRecordError
from .field import Field
from .record import EPN_FIELD, Record

if TYPE_CHECKING:
    from .local_record import LocalRecord


class CopyRecord(Record):
    """Represents a PICA+ copy record."""

    LEVEL = 2

    def __init__(self, fields: Iterable[Field] = ()):
        self._item_number: Optional[int] = None
        super().__init__(fields)

    @property
    def item_number(self) -> Optional[int]:
        return self._item_number

    def append(self, field: Field) -> None:
        """
        Append a field to the copy record.

        The first field fixes the item number; later fields must have it as
        their occurrence.
        """
        self._check_field(field)
        if self._item_number is None:
            if self._parent is not None:
                sibling = self._parent.get_copy_record_by_item_number(field.occurrence)
                if sibling is not None and sibling is not self:
                    raise ChildKeyCollision(
                        f"Cannot append {field}: {self._parent} already has a copy record with item number {field.occurrence}")
            self._item_number = field.occurrence
        elif field.occurrence != self._item_number:
            raise ItemNumberMismatch(f"Item number mismatch: {self._item_number}, {field.occurrence}")
        self._fields.append(field)

    def set_fields(self, fields: Iterable[Field]) -> None:
        item_number = self._item_number
        self._item_number = None
        try:
            super().set_fields(fields)
        except PicaRecordError:
            self._item_number = item_number
            raise

    def get_epn(self) -> Optional[str]:
        """Return the exemplar production number (203@$0) or None."""
        return self._get_subfield_value(EPN_FIELD, '0')

    def set_epn(self, epn: str) -> None:
        """Set the exemplar production number, creating field 203@ if necessary."""
        self._set_subfield_value(EPN_FIELD, '0', epn, '203@', self._item_number)

    def set_local_record(self, record: 'LocalRecord') -> None:
        """Set the containing local record."""
        from .local_record import LocalRecord

        if not isinstance(record, LocalRecord):
            raise TypeError(f"Expected LocalRecord, got {record.__class__.__name__}")
        self._attach(record)

    def unset_local_record(self) -> None:
        """Unset the containing local record."""
        self._detach()

    def get_local_record(self) -> Optional['LocalRecord']:
        """Return the containing local record or None."""
        return self._parent

    def clone(self) -> 'CopyRecord':
        """Return a copy of the record. The copy is not attached to a local record."""
        record = super().clone()
        record._item_number = self._item_number
        return record
