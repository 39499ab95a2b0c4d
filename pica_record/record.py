"""
PICA+ Record

Base class of all record structures. It implements the field list shared by
every record kind and is the direct parent of the records that do not contain
other records (authority and copy records).
"""

import logging
from abc import ABC
from typing import Any, Callable, Iterable, List, Mapping, Optional

from .errors import (
    DuplicateField,
    InvalidLevel,
    InvalidTag,
    MalformedRecordDescriptor,
    MissingTypeField,
    PicaRecordError,
)
from .field import Field
from .subfield import Subfield

PPN_FIELD = '003@/00'
TYPE_FIELD = '002@/00'
ILN_FIELD = '101@/00'
EPN_FIELD = '203@'

Predicate = Callable[[Field], bool]


class Record(ABC):
    """Ordered list of fields, unique by identity."""

    # Field level accepted by append(), None accepts every level
    LEVEL: Optional[int] = None

    @classmethod
    def factory(cls, record: Mapping[str, Any]) -> 'Record':
        """
        Return a new record built from its descriptor.

        Returns an AuthorityRecord if the type field 002@/00$0 starts with
        'T', a TitleRecord otherwise.
        """
        from .authority_record import AuthorityRecord
        from .title_record import TitleRecord

        if 'fields' not in record:
            raise MalformedRecordDescriptor("Missing 'fields' key in record descriptor")
        fields = [Field.factory(field) for field in record['fields']]

        record_type = None
        is_type_field = Field.match(TYPE_FIELD)
        for field in fields:
            if is_type_field(field):
                type_subfield = field.get_subfields('0')[0]
                if type_subfield is not None:
                    record_type = type_subfield.value
                    break
        if record_type is None:
            raise MissingTypeField(f"Missing type field ({TYPE_FIELD}$0)")

        if record_type.startswith('T'):
            result = AuthorityRecord(fields)
        else:
            result = TitleRecord(fields)
        logging.debug(f"Built {result.__class__.__name__} from {len(fields)} fields")
        return result

    def __init__(self, fields: Iterable[Field] = ()):
        self._fields: List[Field] = []
        self._parent: Optional['Record'] = None
        self.set_fields(fields)

    def select(self, predicate: Predicate) -> List[Field]:
        """Return fields matching predicate."""
        return [field for field in self.get_fields() if predicate(field)]

    def delete(self, predicate: Predicate) -> None:
        """Delete fields matching predicate."""
        self._fields = [field for field in self._fields if not predicate(field)]

    def append(self, field: Field) -> None:
        """Append a field to the record."""
        self._check_field(field)
        self._fields.append(field)

    def _check_field(self, field: Field) -> None:
        if self.LEVEL is not None and field.level != self.LEVEL:
            raise InvalidLevel(f"Invalid field level {field.level} for {field} in {self}")
        if self.contains_field(field):
            raise DuplicateField(f"{self} already contains {field}")

    def contains_field(self, field: Field) -> bool:
        return any(present is field for present in self._fields)

    def set_fields(self, fields: Iterable[Field]) -> None:
        """Replace the fields of the record, leaving it unchanged on error."""
        previous = self._fields
        self._fields = []
        try:
            for field in fields:
                self.append(field)
        except PicaRecordError:
            self._fields = previous
            raise

    def sort(self) -> None:
        """Sort the fields by shorthand."""
        self._fields.sort(key=lambda field: field.shorthand)

    def is_empty(self) -> bool:
        """A record is empty if it contains no fields."""
        return not self._fields

    def is_valid(self) -> bool:
        """A record is valid if it is not empty and contains no empty field."""
        return not self.is_empty() and not any(field.is_empty() for field in self.get_fields())

    def get_fields(self, selector: Optional[str] = None) -> List[Field]:
        """
        Return fields of the record.

        If selector is given it is the body of a regular expression and only
        fields whose shorthand it matches are returned.
        """
        if selector is None:
            return list(self._fields)
        return self.select(Field.match(selector))

    def get_first_matching_field(self, selector: str) -> Optional[Field]:
        """Return the first field matching selector or None."""
        fields = self.get_fields(selector)
        return fields[0] if fields else None

    def get_maximum_occurrence_of(self, tag: str) -> Optional[int]:
        """Return the highest occurrence of fields with tag or None."""
        if not Field.is_valid_tag(tag):
            raise InvalidTag(f"Invalid field tag: {tag!r}")
        occurrences = [field.occurrence for field in self.get_fields() if field.tag == tag]
        return max(occurrences) if occurrences else None

    def clone(self) -> 'Record':
        """Return a copy of the record with cloned fields."""
        record = self.__class__()
        record._fields = [field.clone() for field in self._fields]
        return record

    def _get_subfield_value(self, selector: str, code: str) -> Optional[str]:
        field = self.get_first_matching_field(selector)
        if field is not None:
            subfield = field.get_nth_subfield(code, 0)
            if subfield is not None:
                return subfield.value
        return None

    def _set_subfield_value(self, selector: str, code: str, value: str, tag: str, occurrence: Any) -> None:
        field = self.get_first_matching_field(selector)
        if field is None:
            self.append(Field(tag, occurrence, [Subfield(code, value)]))
            return
        subfield = field.get_nth_subfield(code, 0)
        if subfield is None:
            field.add_subfield(Subfield(code, value))
        else:
            subfield.value = value

    def _attach(self, parent: 'Record') -> None:
        """Make parent the owner of this record, moving it from a previous owner."""
        if self._parent is parent and parent._contains_record(self):
            return
        parent._check_record(self)
        self._detach()
        parent._records.append(self)
        self._parent = parent

    def _detach(self) -> None:
        """Remove this record from its owner, if any."""
        parent = self._parent
        if parent is None:
            return
        if parent._contains_record(self):
            parent._records = [record for record in parent._records if record is not self]
        self._parent = None

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:{id(self):x}"
