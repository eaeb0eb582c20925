"""Date-of-birth and sex block (positions 6–10).

Layout: YY M DD
  - YY: last 2 digits of the birth year
  - M:  month letter from ABCDEHLMPRST (non-sequential)
  - DD: day of birth, +40 for women (01–31 male, 41–71 female)

Only the last two digits of the year are stored, so turning the block back
into a calendar date needs either an explicit century or a reference instant
to guess the most probable one.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from codicefiscale.calculators.homocode import base_variation
from codicefiscale.date_input import century_of, parse_date_input
from codicefiscale.enums import Sex
from codicefiscale.exceptions import DateMismatchError, InvalidSexError
from codicefiscale.schemas import RawDateOfBirth
from codicefiscale.tables import MONTH_LETTERS

FEMALE_DAY_OFFSET = 40

_THIRTY_DAY_MONTHS = {4, 6, 9, 11}


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def normalize_sex(value: str) -> Sex:
    """Map 'M'/'F' (any case, surrounding blanks allowed) to Sex.

    Raises:
        InvalidSexError: For anything else.
    """
    if isinstance(value, Sex):
        return value
    cleaned = str(value).strip().upper()
    try:
        return Sex(cleaned)
    except ValueError as exc:
        raise InvalidSexError(f"Sex must be 'M' or 'F', got {value!r}", sex=value) from exc


def encode_date_of_birth(date_of_birth: date, sex: str) -> str:
    """Encode a birth date and sex into the 5-character block.

    Raises:
        InvalidSexError: If sex is not M or F.
    """
    day = date_of_birth.day
    if normalize_sex(sex) is Sex.FEMALE:
        day += FEMALE_DAY_OFFSET
    return f"{date_of_birth.year % 100:02d}{MONTH_LETTERS[date_of_birth.month - 1]}{day:02d}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_date_of_birth(code: str) -> RawDateOfBirth:
    """Extract the raw (yy, mm, dd) date from a format-valid code."""
    base = base_variation(code)
    day = int(base[9:11])
    if day > FEMALE_DAY_OFFSET:
        day -= FEMALE_DAY_OFFSET
    month = MONTH_LETTERS.index(base[8]) + 1
    return RawDateOfBirth(year=base[6:8], month=f"{month:02d}", day=f"{day:02d}")


def decode_sex(code: str) -> Sex:
    """The day field is the only carrier of sex: above 40 means female."""
    if int(base_variation(code)[9:11]) > FEMALE_DAY_OFFSET:
        return Sex.FEMALE
    return Sex.MALE


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_plausible(raw: RawDateOfBirth, century: int | str | None = None) -> bool:
    """Check the day against the length of the decoded month.

    For February without a century the year is ambiguous, so the check is
    permissive: a ``yy`` that is not a multiple of 4 can never be leap (28
    days), every other ``yy`` is accepted up to the 29th. ``yy == 00`` thus
    passes day 29 even though 1900 and 2100 were not leap years.
    """
    year = int(raw.year)
    month = int(raw.month)
    day = int(raw.day)

    if month in _THIRTY_DAY_MONTHS:
        max_days = 30
    elif month == 2:
        if century is not None:
            max_days = 29 if is_leap_year(century_of(century) + year) else 28
        elif year != 0 and year % 4 != 0:
            max_days = 28
        else:
            max_days = 29
    else:
        max_days = 31

    return 1 <= day <= max_days


# ---------------------------------------------------------------------------
# Century resolution
# ---------------------------------------------------------------------------


def combine_with_century(raw: RawDateOfBirth, century: int | str) -> date:
    """Build the concrete date of birth in the given century.

    Raises:
        DateMismatchError: If the result is not a real calendar day.
    """
    year = century_of(century) + int(raw.year)
    try:
        return date(year, int(raw.month), int(raw.day))
    except ValueError as exc:
        raise DateMismatchError(
            f"{year}-{raw.month}-{raw.day} is not a valid date",
            year=year, month=raw.month, day=raw.day,
        ) from exc


def _candidate(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def reconstruct_date(
    yy: str | int,
    mm: str | int,
    dd: str | int,
    min_age: int | None = None,
    reference: Any = None,
) -> date:
    """Guess the most probable full date of birth from a 2-digit year.

    The two candidates are the year in the reference century ("after") and
    the same year one century earlier ("before"). "After" is discarded when
    it does not precede the reference day; otherwise it wins unless
    ``min_age`` says the person would be too young.

    Args:
        yy: Year within the century.
        mm: Month, 1–12.
        dd: Day of month.
        min_age: Minimum age the person is known to have.
        reference: Reference instant (any accepted date input); defaults to now.

    Returns:
        The chosen date.

    Raises:
        DateMismatchError: If the chosen candidate is not a real calendar day.
        DateParseError: If ``reference`` cannot be interpreted.
    """
    reference_dt = parse_date_input(reference if reference is not None else datetime.now())
    reference_day = reference_dt.date()

    century = century_of(reference_dt.year)
    year, month, day = int(yy), int(mm), int(dd)
    after_year = century + year
    before_year = after_year - 100

    after = _candidate(after_year, month, day)
    before = _candidate(before_year, month, day)

    if after is None or after >= reference_day:
        chosen = before
    elif not min_age:
        chosen = after
    elif reference_dt.year - after_year >= min_age:
        chosen = after
    else:
        chosen = before

    if chosen is None:
        raise DateMismatchError(
            f"No valid date of birth for {year:02d}-{month:02d}-{day:02d}",
            year=year, month=month, day=day,
        )
    return chosen
