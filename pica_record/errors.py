"""
PICA+ Record Errors

Exception hierarchy for the record model. Every error is a precondition
violation raised at the offending call, before anything is mutated.
"""

__all__ = [
    "PicaRecordError",
    "InvalidCode",
    "InvalidValue",
    "InvalidTag",
    "InvalidOccurrence",
    "InvalidLevel",
    "DuplicateField",
    "DuplicateSubfield",
    "DuplicateChildRecord",
    "ItemNumberMismatch",
    "ChildKeyCollision",
    "NotFound",
    "MissingTypeField",
    "MissingLocalRecord",
    "MalformedRecordDescriptor",
    "MalformedFieldDescriptor",
    "MalformedSubfieldDescriptor",
]


class PicaRecordError(ValueError):
    """Base class of all record model errors."""


class InvalidCode(PicaRecordError):
    """Subfield code outside [a-z0-9#]."""


class InvalidValue(PicaRecordError):
    """Subfield value is missing."""


class InvalidTag(PicaRecordError):
    """Field tag does not match the PICA+ tag pattern."""


class InvalidOccurrence(PicaRecordError):
    """Field occurrence is not an integer in [0, 100)."""


class InvalidLevel(PicaRecordError):
    """Field level not accepted by the target record."""


class DuplicateField(PicaRecordError):
    """Field is already part of the record."""


class DuplicateSubfield(PicaRecordError):
    """Subfield is already part of the field."""


class DuplicateChildRecord(PicaRecordError):
    """Record is already contained in the nested record."""


class ItemNumberMismatch(PicaRecordError):
    """Field occurrence differs from the copy record's item number."""


class ChildKeyCollision(PicaRecordError):
    """A copy record with the same item number is already present."""


class NotFound(PicaRecordError):
    """Entity to remove is not part of the collection."""


class MissingTypeField(PicaRecordError):
    """Record descriptor has no type field 002@/00$0."""


class MissingLocalRecord(PicaRecordError):
    """Level 2 field appears before any level 1 field."""


class MalformedRecordDescriptor(PicaRecordError):
    """Record descriptor lacks the 'fields' key."""


class MalformedFieldDescriptor(PicaRecordError):
    """Field descriptor lacks 'tag', 'occurrence' or 'subfields'."""


class MalformedSubfieldDescriptor(PicaRecordError):
    """Subfield descriptor lacks 'code' or 'value'."""
