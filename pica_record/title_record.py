"""
PICA+ Title Record

The title record is the root of the record hierarchy. It holds the level 0
fields and one local record per holding library. The grouping of level 1 and
level 2 fields into local and copy records is not marked in the format, it is
inferred from the order of the fields:

- a level 1 field not directly preceded by another level 1 field starts a new
  local record
- a level 2 field belongs to the last local record, in the copy record whose
  item number equals the field occurrence
"""

import logging
from typing import Iterable, List, Optional

from .copy_record import CopyRecord
from .errors import DuplicateField, MissingLocalRecord
from .field import Field
from .local_record import LocalRecord
from .nested_record import NestedRecord
from .record import PPN_FIELD, Record


class TitleRecord(NestedRecord):
    """Represents a PICA+ title record."""

    LEVEL = 0

    def set_fields(self, fields: Iterable[Field]) -> None:
        """
        Replace the fields of the record and rebuild its local records.

        The new hierarchy is built completely before it replaces the current
        one, so the record is unchanged if a field is rejected.
        """
        own_fields: List[Field] = []
        local_records: List[LocalRecord] = []
        seen = set()
        prev_level = None
        for field in fields:
            if id(field) in seen:
                raise DuplicateField(f"{field} occurs twice in fields for {self}")
            seen.add(id(field))
            level = field.level
            if level == 0:
                own_fields.append(field)
            elif level == 1 and prev_level != 1:
                logging.debug(f"Starting local record at {field}")
                local_records.append(LocalRecord([field]))
            elif not local_records:
                raise MissingLocalRecord(f"{field} is not preceded by a level 1 field")
            elif level == 1:
                local_records[-1].append(field)
            else:
                local_record = local_records[-1]
                copy_record = local_record.get_copy_record_by_item_number(field.occurrence)
                if copy_record is not None:
                    copy_record.append(field)
                else:
                    local_record.add_copy_record(CopyRecord([field]))
            prev_level = level

        for record in list(self._records):
            record._detach()
        self._fields = own_fields
        for record in local_records:
            self.add_local_record(record)

    def add_local_record(self, record: LocalRecord) -> None:
        """Add a local record, moving it from its previous title record if any."""
        if not isinstance(record, LocalRecord):
            raise TypeError(f"Expected LocalRecord, got {record.__class__.__name__}")
        self._add_record(record)

    def remove_local_record(self, record: LocalRecord) -> None:
        """Remove a local record."""
        self._remove_record(record)

    def contains_local_record(self, record: LocalRecord) -> bool:
        """Return True if the title record contains the local record."""
        return self._contains_record(record)

    def get_local_records(self) -> List[LocalRecord]:
        return list(self._records)

    def get_local_record_by_iln(self, iln) -> Optional[LocalRecord]:
        """Return the first local record with the internal library number or None."""
        for record in self._records:
            record_iln = record.get_iln()
            if record_iln is not None and record_iln == str(iln):
                return record
        return None

    def get_ppn(self) -> Optional[str]:
        """Return the PICA production number (003@/00$0) or None."""
        return self._get_subfield_value(PPN_FIELD, '0')

    def set_ppn(self, ppn: str) -> None:
        """Set the PICA production number, creating field 003@/00 if necessary."""
        self._set_subfield_value(PPN_FIELD, '0', ppn, '003@', 0)

    def _compare_records(self, a: Record, b: Record) -> int:
        """Local records are compared by their ILN as a number."""
        return _iln_number(a.get_iln()) - _iln_number(b.get_iln())


def _iln_number(iln: Optional[str]) -> int:
    if iln is not None and iln.isdecimal():
        return int(iln)
    return 0
