"""Strict parser for "name,age" person records."""

from .errors import (
    EmptyInput,
    InvalidField,
    MissingField,
    ParseError,
    ParseErrorKind,
    PersonRecordError,
)
from .records import Record, parse_age, parse_name, parse_record, render_record

__all__ = [
    "EmptyInput",
    "InvalidField",
    "MissingField",
    "ParseError",
    "ParseErrorKind",
    "PersonRecordError",
    "Record",
    "parse_age",
    "parse_name",
    "parse_record",
    "render_record",
]
