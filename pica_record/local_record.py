"""
PICA+ Local Record

A local record holds the level 1 fields of one library's holdings and the
copy records of that library, keyed by item number.
"""

from typing import TYPE_CHECKING, List, Optional

from .copy_record import CopyRecord
from .errors import ChildKeyCollision
from .nested_record import NestedRecord
from .record import ILN_FIELD, Record

if TYPE_CHECKING:
    from .title_record import TitleRecord


class LocalRecord(NestedRecord):
    """Represents a PICA+ local record."""

    LEVEL = 1

    def add_copy_record(self, record: CopyRecord) -> None:
        """Add a copy record, moving it from its previous local record if any."""
        if not isinstance(record, CopyRecord):
            raise TypeError(f"Expected CopyRecord, got {record.__class__.__name__}")
        self._add_record(record)

    def remove_copy_record(self, record: CopyRecord) -> None:
        """Remove a copy record."""
        self._remove_record(record)

    def contains_copy_record(self, record: CopyRecord) -> bool:
        """Return True if the local record contains the copy record."""
        return self._contains_record(record)

    def get_copy_records(self) -> List[CopyRecord]:
        return list(self._records)

    def get_copy_record_by_item_number(self, item_number: int) -> Optional[CopyRecord]:
        """Return the copy record with the item number or None."""
        for record in self._records:
            if record.item_number == item_number:
                return record
        return None

    def get_iln(self) -> Optional[str]:
        """Return the internal library number (101@/00$a) or None."""
        return self._get_subfield_value(ILN_FIELD, 'a')

    def set_title_record(self, record: 'TitleRecord') -> None:
        """Set the containing title record."""
        from .title_record import TitleRecord

        if not isinstance(record, TitleRecord):
            raise TypeError(f"Expected TitleRecord, got {record.__class__.__name__}")
        self._attach(record)

    def unset_title_record(self) -> None:
        """Unset the containing title record."""
        self._detach()

    def get_title_record(self) -> Optional['TitleRecord']:
        """Return the containing title record or None."""
        return self._parent

    def _check_record(self, record: Record) -> None:
        super()._check_record(record)
        item_number = record.item_number
        if item_number is not None and self.get_copy_record_by_item_number(item_number) is not None:
            raise ChildKeyCollision(
                f"Cannot add {record}: copy record with item number {item_number} already present")

    def _compare_records(self, a: Record, b: Record) -> int:
        """Copy records are compared by item number."""
        return (a.item_number or 0) - (b.item_number or 0)
