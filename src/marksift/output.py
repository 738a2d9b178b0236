"""Output formatting for bookmark records."""

import sys
from typing import Iterable, TextIO

from .extractors import BookmarkRecord

FIELD_NAMES = {
    "t": "title",
    "u": "url",
    "d": "description",
}


def format_record(record: BookmarkRecord, fields: str = "tu", separator: str = " ") -> str:
    """Render the selected fields of a record, in the order given.

    ``fields`` is a string over ``t`` (title), ``u`` (url) and
    ``d`` (description). Empty fields are left out rather than printed
    as blanks.
    """
    values = (getattr(record, FIELD_NAMES[field]) for field in fields)
    return separator.join(value for value in values if value)


def write_records(
    records: Iterable[BookmarkRecord],
    fields: str = "tu",
    separator: str = " ",
    record_separator: str = "\n",
    stream: TextIO | None = None,
) -> int:
    """Write records to a stream (stdout by default) and return the count."""
    stream = stream or sys.stdout
    count = 0
    for record in records:
        stream.write(format_record(record, fields, separator) + record_separator)
        count += 1
    return count
