"""
PICA+ Nested Record

A nested record contains zero or more other records. It is the base class of
title and local records and propagates delete, sort, emptiness, validity and
field access down to the contained records.
"""

from abc import abstractmethod
from functools import cmp_to_key
from typing import Iterable, List, Optional

from .errors import DuplicateChildRecord, NotFound
from .field import Field
from .record import Predicate, Record


class NestedRecord(Record):
    """Record with an ordered list of contained records."""

    def __init__(self, fields: Iterable[Field] = ()):
        self._records: List[Record] = []
        super().__init__(fields)

    def delete(self, predicate: Predicate) -> None:
        """Delete matching fields here and in every contained record."""
        super().delete(predicate)
        for record in self._records:
            record.delete(predicate)

    def sort(self) -> None:
        """Sort fields and contained records."""
        super().sort()
        for record in self._records:
            record.sort()
        self._records.sort(key=cmp_to_key(self._compare_records))

    def is_empty(self) -> bool:
        """A nested record is empty iff it has no fields and every contained record is empty."""
        return super().is_empty() and all(record.is_empty() for record in self._records)

    def is_valid(self) -> bool:
        """A nested record is valid iff it and all contained records are valid."""
        return super().is_valid() and all(record.is_valid() for record in self._records)

    def get_fields(self, selector: Optional[str] = None) -> List[Field]:
        if selector is None:
            fields = list(self._fields)
            for record in self._records:
                fields.extend(record.get_fields())
            return fields
        return self.select(Field.match(selector))

    def clone(self) -> 'NestedRecord':
        """Return a copy of the record; contained records are cloned and attached to the copy."""
        record = super().clone()
        for contained in self._records:
            record._add_record(contained.clone())
        return record

    @abstractmethod
    def _compare_records(self, a: Record, b: Record) -> int:
        """Compare two contained records, returning a negative, zero or positive number."""

    def _check_record(self, record: Record) -> None:
        """Raise if record cannot be added as a contained record."""
        if self._contains_record(record):
            raise DuplicateChildRecord(f"{self} already contains {record}")

    def _add_record(self, record: Record) -> None:
        if self._contains_record(record):
            raise DuplicateChildRecord(f"{self} already contains {record}")
        record._attach(self)

    def _remove_record(self, record: Record) -> None:
        if not self._contains_record(record):
            raise NotFound(f"{self} does not contain {record}")
        record._detach()

    def _contains_record(self, record: Record) -> bool:
        return any(contained is record for contained in self._records)
