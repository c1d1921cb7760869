"""Comma-separated person record parsing.

A "record" is a single string with a fixed two-field schema:
    <name>,<age>

Example:
    Mark,20

Design notes:
- Strict on purpose: exactly one comma, nothing is stripped.
- `age` is unsigned base-10 ASCII only; `int()` alone is too lenient
  (it accepts whitespace, signs, underscores and non-ASCII digits).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import EmptyInput, InvalidField, MissingField

SEPARATOR = ","


@dataclass(frozen=True)
class Record:
    """A person with a non-empty name and a non-negative age.

    Direct construction is checked too, so a Record never breaks the
    invariants `parse_record` enforces.
    """
    name: str
    age: int

    def __post_init__(self) -> None:
        bad = []
        if not isinstance(self.name, str) or not self.name:
            bad.append("name")
        if not isinstance(self.age, int) or isinstance(self.age, bool) or self.age < 0:
            bad.append("age")
        if bad:
            raise InvalidField(f"invalid {' and '.join(bad)} for Record: {self.name!r}, {self.age!r}", fields=bad)


def parse_name(raw: str) -> Optional[str]:
    """Return the name verbatim, or None if it is empty."""
    if not raw:
        return None
    return raw


def parse_age(raw: str) -> Optional[int]:
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw, 10)


def parse_record(text: str) -> Record:
    """Parse one "name,age" string into a Record.

    Raises:
        EmptyInput: if `text` is empty.
        MissingField: if there is no comma.
        InvalidField: if there is more than one comma, the name is empty,
            or the age is not a non-negative integer.
    """
    if len(text) == 0:
        raise EmptyInput()

    parts = text.split(SEPARATOR)
    if len(parts) < 2:
        raise MissingField("name and age both required")
    if len(parts) > 2:
        raise InvalidField(f"expected 2 fields separated by {SEPARATOR!r}, got {len(parts)}: {text!r}")

    raw_name, raw_age = parts
    name = parse_name(raw_name)
    age = parse_age(raw_age)

    bad = []
    if name is None:
        bad.append("name")
    if age is None:
        bad.append("age")
    if bad:
        raise InvalidField(f"invalid {' and '.join(bad)} in {text!r}", fields=bad)

    return Record(name=name, age=age)


def render_record(r: Record) -> str:
    """Format `r` as "name,age", the inverse of parse_record for comma-free names."""
    return f"{r.name}{SEPARATOR}{r.age}"
