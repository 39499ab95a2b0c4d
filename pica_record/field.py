"""
PICA+ Field

A field is an ordered list of subfields identified by a tag and an
occurrence. The first digit of the tag is the field level:

- 0: title level
- 1: local (holding) level
- 2: copy level

The shorthand "TAG/OO" (e.g. 003@/00) is the string used to select fields.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable, List, Optional

from .errors import (
    DuplicateSubfield,
    InvalidOccurrence,
    InvalidTag,
    MalformedFieldDescriptor,
    NotFound,
)
from .subfield import Subfield


class Field:
    """Represents a PICA+ field."""

    TAG_PATTERN = re.compile(r'[012][0-9]{2}[A-Z@]')
    OCCURRENCE_PATTERN = re.compile(r'[0-9]+')

    @classmethod
    def is_valid_tag(cls, arg: Any) -> bool:
        """Return True if argument is a valid field tag."""
        return isinstance(arg, str) and cls.TAG_PATTERN.fullmatch(arg) is not None

    @classmethod
    def is_valid_occurrence(cls, arg: Any) -> bool:
        """
        Return True if argument is a valid field occurrence.

        None counts as occurrence 0 and a string of decimal digits is read as
        an integer.
        """
        return cls._coerce_occurrence(arg) is not None

    @classmethod
    def _coerce_occurrence(cls, arg: Any) -> Optional[int]:
        if arg is None:
            return 0
        if isinstance(arg, str):
            if not cls.OCCURRENCE_PATTERN.fullmatch(arg):
                return None
            arg = int(arg)
        if isinstance(arg, bool) or not isinstance(arg, int):
            return None
        if 0 <= arg < 100:
            return arg
        return None

    @staticmethod
    def match(pattern: str) -> Callable[['Field'], bool]:
        """Return a predicate that searches a field's shorthand for a regular expression."""
        regexp = re.compile(pattern)

        def predicate(field: 'Field') -> bool:
            return regexp.search(field.shorthand) is not None

        return predicate

    @classmethod
    def factory(cls, field: Any) -> 'Field':
        """
        Create a field from a {'tag', 'occurrence', 'subfields'} mapping or a
        (tag, occurrence, subfields) triple. Each subfield is a descriptor
        accepted by Subfield.factory.
        """
        if isinstance(field, Mapping):
            for key in ('tag', 'occurrence', 'subfields'):
                if key not in field:
                    raise MalformedFieldDescriptor(f"Missing '{key}' key in field descriptor")
            tag, occurrence, subfields = field['tag'], field['occurrence'], field['subfields']
        elif isinstance(field, Sequence) and not isinstance(field, str) and len(field) == 3:
            tag, occurrence, subfields = field
        else:
            raise MalformedFieldDescriptor(f"Invalid field descriptor: {field!r}")
        return cls(tag, occurrence, [Subfield.factory(subfield) for subfield in subfields])

    def __init__(self, tag: str, occurrence: Any = None, subfields: Iterable[Subfield] = ()):
        if not self.is_valid_tag(tag):
            raise InvalidTag(f"Invalid field tag: {tag!r}")
        occurrence_value = self._coerce_occurrence(occurrence)
        if occurrence_value is None:
            raise InvalidOccurrence(f"Invalid field occurrence: {occurrence!r}")
        self._tag = tag
        self._occurrence = occurrence_value
        self._level = int(tag[0])
        self._shorthand = f"{tag}/{occurrence_value:02d}"
        self._subfields: List[Subfield] = []
        self.set_subfields(subfields)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def occurrence(self) -> int:
        return self._occurrence

    @property
    def level(self) -> int:
        return self._level

    @property
    def shorthand(self) -> str:
        return self._shorthand

    def set_subfields(self, subfields: Iterable[Subfield]) -> None:
        """Replace the subfield list."""
        replacement: List[Subfield] = []
        for subfield in subfields:
            if any(subfield is present for present in replacement):
                raise DuplicateSubfield(f"Subfield {subfield.code} occurs twice in subfields for {self}")
            replacement.append(subfield)
        self._subfields = replacement

    def add_subfield(self, subfield: Subfield) -> None:
        """Add a subfield to the end of the subfield list."""
        if self.contains_subfield(subfield):
            raise DuplicateSubfield(f"Subfield {subfield.code} already part of {self}")
        self._subfields.append(subfield)

    def remove_subfield(self, subfield: Subfield) -> None:
        """Remove a subfield."""
        for index, present in enumerate(self._subfields):
            if present is subfield:
                del self._subfields[index]
                return
        raise NotFound(f"Subfield {subfield.code} not part of {self}")

    def contains_subfield(self, subfield: Subfield) -> bool:
        return any(present is subfield for present in self._subfields)

    def get_subfields(self, *codes: str) -> List[Optional[Subfield]]:
        """
        Return subfields of the field.

        Without arguments all subfields are returned. Otherwise the nth element
        of the result belongs to the nth code and holds the first subfield with
        that code not already returned for an earlier code, or None. Repeat a
        code to retrieve repeated subfields.
        """
        if not codes:
            return list(self._subfields)
        remaining = list(self._subfields)
        selected: List[Optional[Subfield]] = []
        for code in codes:
            for index, subfield in enumerate(remaining):
                if subfield.code == code:
                    selected.append(subfield)
                    del remaining[index]
                    break
            else:
                selected.append(None)
        return selected

    def get_nth_subfield(self, code: str, n: int) -> Optional[Subfield]:
        """Return the nth (zero-based) subfield with the given code, or None."""
        count = 0
        for subfield in self._subfields:
            if subfield.code == code:
                if count == n:
                    return subfield
                count += 1
        return None

    def is_empty(self) -> bool:
        """A field is empty if it contains no subfields."""
        return not self._subfields

    def clone(self) -> 'Field':
        """Return a copy of the field with cloned subfields."""
        return Field(self._tag, self._occurrence, [subfield.clone() for subfield in self._subfields])

    def __str__(self) -> str:
        return self._shorthand

    def __repr__(self) -> str:
        return f"Field({self._tag!r}, {self._occurrence}, {self._subfields!r})"
