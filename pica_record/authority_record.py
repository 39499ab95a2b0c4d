"""
PICA+ Authority Record

Authority records are flat: they only hold level 0 fields.
"""

from typing import Optional

from .record import PPN_FIELD, TYPE_FIELD, Record


class AuthorityRecord(Record):
    """Represents a PICA+ authority record."""

    LEVEL = 0

    def get_ppn(self) -> Optional[str]:
        """Return the PICA production number (003@/00$0) or None."""
        return self._get_subfield_value(PPN_FIELD, '0')

    def set_ppn(self, ppn: str) -> None:
        """Set the PICA production number, creating field 003@/00 if necessary."""
        self._set_subfield_value(PPN_FIELD, '0', ppn, '003@', 0)

    def is_valid(self) -> bool:
        """
        Return True if the record is valid.

        A valid authority record has exactly one PPN field (003@/00) with a
        subfield $0 and exactly one type field (002@/00) whose first
        subfield $0 is 'T'.
        """
        return super().is_valid() and self._check_ppn() and self._check_type()

    def _check_ppn(self) -> bool:
        fields = self.get_fields(PPN_FIELD)
        return len(fields) == 1 and fields[0].get_nth_subfield('0', 0) is not None

    def _check_type(self) -> bool:
        fields = self.get_fields(TYPE_FIELD)
        if len(fields) != 1:
            return False
        type_subfield = fields[0].get_nth_subfield('0', 0)
        return type_subfield is not None and type_subfield.value == 'T'
