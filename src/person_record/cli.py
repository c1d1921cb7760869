"""Command-line interface for person_record.

Intentionally simple:
- parses the built-in example, or each string given on the command line
- prints each record's repr to stdout
- stops at the first failure with exit code 2
"""

from __future__ import annotations
import argparse
import sys

from .errors import ParseError
from .records import parse_record

EXAMPLE = "Mark,20"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="person-record",
        description="Parse 'name,age' records.",
        epilog="Put '--' before records that start with '-', e.g. person-record -- -Ann,7",
    )
    p.add_argument("text", nargs="*", default=[EXAMPLE], help=f"Record strings to parse (default: {EXAMPLE!r})")
    args = p.parse_args(argv)

    for text in args.text:
        try:
            rec = parse_record(text)
        except ParseError as ex:
            sys.stderr.write(f"error: {ex.kind.value}: {ex}\n")
            return 2
        sys.stdout.write(f"{rec!r}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
