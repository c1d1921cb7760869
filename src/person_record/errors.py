"""Errors raised while parsing "name,age" records."""

from __future__ import annotations
import enum
from typing import Sequence


class ParseErrorKind(enum.Enum):
    EMPTY_INPUT = "empty input"
    MISSING_FIELD = "missing field"
    INVALID_FIELD = "invalid field"


class PersonRecordError(Exception):
    """Base error for this package."""


class ParseError(PersonRecordError):
    """Raised when an input string cannot be parsed into a record.

    Callers can catch a concrete subclass or branch on `kind`. Subclasses
    fix `kind`; the base class must be given one.
    """

    kind: ParseErrorKind | None = None

    def __init__(self, message: str | None = None, kind: ParseErrorKind | None = None) -> None:
        kind = kind or type(self).kind
        if kind is None:
            raise TypeError(f"{type(self).__name__} requires a kind")
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)


class EmptyInput(ParseError):
    """Raised when the whole input string is empty."""

    kind = ParseErrorKind.EMPTY_INPUT


class MissingField(ParseError):
    """Raised when splitting on ',' yields fewer than two parts."""

    kind = ParseErrorKind.MISSING_FIELD


class InvalidField(ParseError):
    """Raised when a field candidate fails validation.

    `fields` names the offending fields in input order; it is empty when
    the input as a whole is malformed (e.g. trailing data).
    """

    kind = ParseErrorKind.INVALID_FIELD

    def __init__(self, message: str | None = None, fields: Sequence[str] = ()) -> None:
        self.fields = tuple(fields)
        super().__init__(message)
