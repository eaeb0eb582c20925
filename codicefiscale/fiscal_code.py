"""The FiscalCode value object: calculation, parsing, accessors and matching.

CF format: AAABBB 00C00 D000 E
  - AAA:  family name block
  - BBB:  given name block
  - 00C00: date of birth and sex (see encoders.dates)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from functools import cached_property
from typing import Any

from codicefiscale.calculators.check_digit import compute_check_digit, has_valid_check_digit
from codicefiscale.calculators.homocode import (
    base_variation,
    generate_all_variations,
    generate_variation,
    is_homocode,
)
from codicefiscale.config import settings
from codicefiscale.date_input import DateInput, parse_date_input
from codicefiscale.encoders.dates import (
    combine_with_century,
    decode_date_of_birth,
    decode_sex,
    encode_date_of_birth,
    is_plausible,
    normalize_sex,
    reconstruct_date,
)
from codicefiscale.encoders.names import encode_family_name, encode_given_name
from codicefiscale.enums import PersonField, Sex
from codicefiscale.exceptions import (
    CheckDigitMismatchError,
    CodiceFiscaleError,
    DateMismatchError,
    InvalidCityCodeError,
    InvalidFormatError,
    InvalidSexError,
    NameTooShortError,
)
from codicefiscale.schemas import RawDateOfBirth
from codicefiscale.tables import CF_PATTERN, CITY_CODE_PATTERN

logger = logging.getLogger(__name__)

_MISSING = object()


# ---------------------------------------------------------------------------
# Module-level checks
# ---------------------------------------------------------------------------


def normalize_code(code: str) -> str:
    return code.strip().upper()


def is_format_valid(code: str) -> bool:
    """Check that an uppercase code matches the 16-character layout."""
    return bool(CF_PATTERN.fullmatch(code))


def is_date_of_birth_correct(code: str, century: int | str | None = None) -> bool:
    """Check that the embedded date is a real day for a format-valid code.

    Without ``century`` the February check is permissive (see
    ``encoders.dates.is_plausible``).
    """
    return is_plausible(decode_date_of_birth(code), century)


def _validate(code: str, century: int | str | None) -> None:
    if not is_format_valid(code):
        raise InvalidFormatError(f"Invalid codice fiscale format: {code!r}", code=code)
    if not is_date_of_birth_correct(code, century):
        raise DateMismatchError(
            f"Date of birth in {code!r} is not a valid calendar day",
            code=code, century=century,
        )
    if not has_valid_check_digit(code):
        raise CheckDigitMismatchError(
            f"Check character of {code!r} should be {compute_check_digit(code)!r}",
            code=code,
        )


def _normalize_city_code(city_code: str) -> str:
    cleaned = str(city_code).strip().upper()
    if not CITY_CODE_PATTERN.fullmatch(cleaned):
        raise InvalidCityCodeError(
            f"City code must be one letter and three digits, got {city_code!r}",
            city_code=city_code,
        )
    return cleaned


# ---------------------------------------------------------------------------
# Person field resolution
# ---------------------------------------------------------------------------


def resolve_person(person: Any, field_map: Mapping[str, str] | None = None) -> dict[PersonField, Any]:
    """Read the canonical person fields from a mapping or an object.

    Args:
        person: A mapping, a PersonInput, or any object with attributes.
        field_map: Canonical field name → caller's key/attribute name.

    Returns:
        Canonical field → value; absent fields are left out.
    """
    field_map = field_map or {}
    values: dict[PersonField, Any] = {}
    for field in PersonField:
        source = field_map.get(field.value, field.value)
        if isinstance(person, Mapping):
            value = person.get(source, _MISSING)
        else:
            value = getattr(person, source, _MISSING)
        if value is not _MISSING:
            values[field] = value
    return values


# ---------------------------------------------------------------------------
# FiscalCode
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FiscalCode:
    """A validated, immutable codice fiscale.

    Construction always validates: ``FiscalCode("rssmra80r01h501b")`` either
    returns a genuine code or raises. Use ``parse`` to pass a century for a
    strict leap-year check.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = normalize_code(self.value)
        _validate(normalized, None)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    # ── Construction ────────────────────────────────────────────────

    @classmethod
    def parse(cls, code: str, century: int | str | None = None) -> FiscalCode:
        """Validate a code string and wrap it.

        Args:
            code: Candidate code; blanks are stripped and case is ignored.
            century: 2- or 4-digit year whose century resolves the birth
                year, used for the February 29 check (19, 1900, 1985 → 1900).

        Raises:
            InvalidFormatError: If the layout is wrong.
            DateMismatchError: If the date is not a real calendar day.
            CheckDigitMismatchError: If the check character is wrong.
        """
        normalized = normalize_code(code)
        try:
            _validate(normalized, century)
        except CodiceFiscaleError as exc:
            logger.debug("Codice fiscale rejected (%s): %s", exc.code, normalized)
            raise
        return cls(normalized)

    @classmethod
    def calculate(
        cls,
        name: str,
        family_name: str,
        date_of_birth: DateInput,
        sex: str,
        city_code: str,
    ) -> FiscalCode:
        """Calculate the code from person data.

        The result is never a homocode: whether the tax office assigned a
        variation cannot be told from the person data.

        Raises:
            InvalidCityCodeError: If city_code is not like "H501".
            NameTooShortError: If a name has fewer than 2 letters.
            InvalidSexError: If sex is not M or F.
            DateParseError: If date_of_birth cannot be interpreted.
        """
        city = _normalize_city_code(city_code)
        partial = (
            encode_family_name(family_name)
            + encode_given_name(name)
            + encode_date_of_birth(parse_date_input(date_of_birth), sex)
            + city
        )
        return cls(partial + compute_check_digit(partial))

    @classmethod
    def calculate_from_person(cls, person: Any, field_map: Mapping[str, str] | None = None) -> FiscalCode:
        """Calculate the code from a mapping or object holding the person fields.

        Raises:
            KeyError: If a required field is missing.
        """
        fields = resolve_person(person, field_map)
        missing = [f.value for f in PersonField if f not in fields]
        if missing:
            raise KeyError(f"Missing person fields: {', '.join(missing)}")
        return cls.calculate(
            fields[PersonField.NAME],
            fields[PersonField.FAMILY_NAME],
            fields[PersonField.DATE_OF_BIRTH],
            fields[PersonField.SEX],
            fields[PersonField.CITY_CODE],
        )

    # ── Derived fields ──────────────────────────────────────────────

    @cached_property
    def is_homocode(self) -> bool:
        return is_homocode(self.value)

    @cached_property
    def base_variation(self) -> str:
        """The code without omocodia substitutions."""
        if not self.is_homocode:
            return self.value
        return base_variation(self.value)

    @cached_property
    def sex(self) -> Sex:
        return decode_sex(self.base_variation)

    @property
    def city_code(self) -> str:
        """Birthplace code (codice catastale, also known as codice Belfiore)."""
        return self.base_variation[11:15]

    @cached_property
    def date_of_birth_raw(self) -> RawDateOfBirth:
        return decode_date_of_birth(self.base_variation)

    def date_of_birth(self, century: int | str) -> date:
        """Date of birth in the given century (1900, 19 and 1985 all mean 1900).

        Raises:
            DateMismatchError: If the day does not exist in that century.
        """
        return combine_with_century(self.date_of_birth_raw, century)

    def probable_date_of_birth(self, min_age: int | None = None, reference: DateInput | None = None) -> date:
        """Most probable date of birth given a reference instant and minimum age.

        Args:
            min_age: Minimum age the holder is known to have; defaults to
                ``settings.default_min_age``.
            reference: Reference instant; defaults to now.
        """
        if min_age is None:
            min_age = settings.default_min_age
        raw = self.date_of_birth_raw
        return reconstruct_date(raw.year, raw.month, raw.day, min_age, reference)

    # ── Variations ──────────────────────────────────────────────────

    def generate_variation(self, index: int) -> str:
        """Omocodia variation ``index`` (1–127) of this code's base."""
        return generate_variation(self.base_variation, index)

    def generate_variations(self) -> list[str]:
        """All 127 omocodia variations, in index order."""
        return generate_all_variations(self.base_variation)

    # ── Matching ────────────────────────────────────────────────────

    def match_name(self, name: str) -> bool:
        try:
            return encode_given_name(name) == self.value[3:6]
        except NameTooShortError:
            return False

    def match_family_name(self, family_name: str) -> bool:
        try:
            return encode_family_name(family_name) == self.value[0:3]
        except NameTooShortError:
            return False

    def match_date_of_birth(self, date_of_birth: DateInput) -> bool:
        """Compare a date against the embedded one (2-digit year).

        Raises:
            DateParseError: If the input cannot be interpreted.
        """
        dt = parse_date_input(date_of_birth)
        raw = self.date_of_birth_raw
        return (f"{dt.year % 100:02d}", f"{dt.month:02d}", f"{dt.day:02d}") == (raw.year, raw.month, raw.day)

    def match_sex(self, sex: str) -> bool:
        try:
            return normalize_sex(sex) is self.sex
        except InvalidSexError:
            return False

    def match_city_code(self, city_code: str) -> bool:
        return str(city_code).strip().upper() == self.city_code

    def validate(
        self,
        person: Any,
        field_map: Mapping[str, str] | None = None,
        partial: bool = False,
    ) -> list[str] | None:
        """Check the code against person data.

        Args:
            person: A mapping, a PersonInput, or any object with attributes.
            field_map: Canonical field name → caller's key/attribute name.
            partial: Only check the fields present in ``person``.

        Returns:
            None when everything matches, otherwise the canonical names of
            the mismatching fields.
        """
        fields = resolve_person(person, field_map)
        matchers = {
            PersonField.NAME: self.match_name,
            PersonField.FAMILY_NAME: self.match_family_name,
            PersonField.DATE_OF_BIRTH: self.match_date_of_birth,
            PersonField.SEX: self.match_sex,
            PersonField.CITY_CODE: self.match_city_code,
        }

        errors: list[str] = []
        for field, matcher in matchers.items():
            if field not in fields:
                if not partial:
                    errors.append(field.value)
                continue
            try:
                matched = matcher(fields[field])
            except CodiceFiscaleError as exc:
                logger.debug("Field %s not comparable (%s)", field.value, exc.code)
                matched = False
            except (TypeError, AttributeError):
                logger.debug("Field %s has unusable type %s", field.value, type(fields[field]).__name__)
                matched = False
            if not matched:
                errors.append(field.value)

        return errors or None
