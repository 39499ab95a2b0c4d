"""PICA+ record model: subfields, fields and the title/local/copy record hierarchy."""

from .authority_record import AuthorityRecord
from .copy_record import CopyRecord
from .errors import (
    ChildKeyCollision,
    DuplicateChildRecord,
    DuplicateField,
    DuplicateSubfield,
    InvalidCode,
    InvalidLevel,
    InvalidOccurrence,
    InvalidTag,
    InvalidValue,
    ItemNumberMismatch,
    MalformedFieldDescriptor,
    MalformedRecordDescriptor,
    MalformedSubfieldDescriptor,
    MissingLocalRecord,
    MissingTypeField,
    NotFound,
    PicaRecordError,
)
from .field import Field
from .local_record import LocalRecord
from .nested_record import NestedRecord
from .record import Record
from .subfield import Subfield
from .title_record import TitleRecord

__version__ = "0.1.0"

__all__ = [
    "Subfield",
    "Field",
    "Record",
    "NestedRecord",
    "AuthorityRecord",
    "TitleRecord",
    "LocalRecord",
    "CopyRecord",
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
