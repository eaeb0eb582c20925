"""Flexible date input and the century convention.

Every date-accepting operation in the package goes through
``parse_date_input`` so the codec only ever handles ``datetime`` values.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from dateutil import parser

from codicefiscale.config import settings
from codicefiscale.enums import DateInputKind
from codicefiscale.exceptions import DateParseError

_TIMESTAMP_PATTERN = re.compile(r"^-?\d+$")

DateInput = date | datetime | int | str


def classify_date_input(value: Any) -> DateInputKind:
    """Tell which of the accepted shapes ``value`` has.

    A string made only of an optional ``-`` and digits is always a timestamp,
    even when it could also be read as a bare year.

    Raises:
        DateParseError: If ``value`` has none of the accepted shapes.
    """
    if isinstance(value, date):
        return DateInputKind.TEMPORAL
    if isinstance(value, int) and not isinstance(value, bool):
        return DateInputKind.TIMESTAMP
    if isinstance(value, str):
        if _TIMESTAMP_PATTERN.match(value.strip()):
            return DateInputKind.TIMESTAMP
        return DateInputKind.CALENDAR_STRING
    raise DateParseError(f"Unsupported date input: {value!r}", date=value)


def parse_date_input(value: Any) -> datetime:
    """Normalize a date-like input into a ``datetime``.

    Args:
        value: A ``date``/``datetime``, a Unix timestamp (int or numeric
            string), or a calendar string understood by dateutil.

    Returns:
        The corresponding naive or aware ``datetime``; timestamps are
        converted in local time.

    Raises:
        DateParseError: If the input cannot be interpreted.
    """
    kind = classify_date_input(value)

    if kind is DateInputKind.TEMPORAL:
        if isinstance(value, datetime):
            return value
        return datetime(value.year, value.month, value.day)

    if kind is DateInputKind.TIMESTAMP:
        try:
            return datetime.fromtimestamp(int(value))
        except (OverflowError, OSError, ValueError) as exc:
            raise DateParseError(f"Timestamp out of range: {value!r}", date=value) from exc

    try:
        return parser.parse(value, dayfirst=settings.date_dayfirst)
    except (ValueError, OverflowError, parser.ParserError) as exc:
        raise DateParseError(f"Could not parse date string {value!r}: {exc!s}", date=value) from exc


def century_of(value: int | str) -> int:
    """Return the century for a 2- or 4-digit year-like value.

    1980 → 1900, 19 → 1900, 2020 → 2000, 20 → 2000.
    """
    year = int(value)
    if year < 100:
        year *= 100
    return (year // 100) * 100
