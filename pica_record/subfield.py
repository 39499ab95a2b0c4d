"""
PICA+ Subfield

A subfield is a pair of a one character code and a possibly empty string
value. The code is fixed at construction, the value can be changed in place.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import InvalidCode, InvalidValue, MalformedSubfieldDescriptor


class Subfield:
    """Represents a PICA+ subfield."""

    CODE_PATTERN = re.compile(r'[a-zA-Z0-9#]')

    @classmethod
    def is_valid_code(cls, arg: Any) -> bool:
        """Return True if argument is a valid subfield code."""
        return isinstance(arg, str) and cls.CODE_PATTERN.fullmatch(arg) is not None

    @classmethod
    def factory(cls, subfield: Any) -> 'Subfield':
        """Create a subfield from a {'code': ..., 'value': ...} mapping or a (code, value) pair."""
        if isinstance(subfield, Mapping):
            for key in ('code', 'value'):
                if key not in subfield:
                    raise MalformedSubfieldDescriptor(f"Missing '{key}' key in subfield descriptor")
            return cls(subfield['code'], subfield['value'])
        if isinstance(subfield, Sequence) and not isinstance(subfield, str) and len(subfield) == 2:
            return cls(subfield[0], subfield[1])
        raise MalformedSubfieldDescriptor(f"Invalid subfield descriptor: {subfield!r}")

    def __init__(self, code: str, value: Any):
        if not self.is_valid_code(code):
            raise InvalidCode(f"Invalid subfield code: {code!r}")
        self._code = code
        self.value = value

    @property
    def code(self) -> str:
        return self._code

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if value is None:
            raise InvalidValue(f"Missing value for subfield {self._code}")
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise InvalidValue(f"Invalid value for subfield {self._code}: {value!r}")
        self._value = str(value)

    def clone(self) -> 'Subfield':
        """Return a new subfield with the same code and value."""
        return Subfield(self._code, self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Subfield({self._code!r}, {self._value!r})"
