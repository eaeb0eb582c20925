"""Tests for the FiscalCode value object.

Tests cover:
- Calculation from person data (plain args, mappings, objects, field maps)
- Parsing and the three distinct rejection kinds
- Accessors on base codes and omocodia variations
- Match predicates and person validation (full and partial)
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from types import SimpleNamespace

import pytest

from codicefiscale.config import settings
from codicefiscale.enums import Sex
from codicefiscale.exceptions import (
    CheckDigitMismatchError,
    DateMismatchError,
    DateParseError,
    InvalidCityCodeError,
    InvalidFormatError,
    InvalidSexError,
    NameTooShortError,
    VariationOutOfRangeError,
)
from codicefiscale.fiscal_code import FiscalCode, is_date_of_birth_correct, is_format_valid
from codicefiscale.schemas import PersonInput, RawDateOfBirth

MARIO = {
    "name": "Mario",
    "family_name": "Rossi",
    "date_of_birth": "1980-10-01",
    "sex": "M",
    "city_code": "H501",
}
MARIO_CF = "RSSMRA80R01H501B"


@pytest.fixture
def mario() -> FiscalCode:
    return FiscalCode.calculate("Mario", "Rossi", "1980-10-01", "M", "H501")


class TestCalculate:
    """Test code calculation."""

    def test_known_code(self, mario: FiscalCode) -> None:
        assert str(mario) == MARIO_CF
        assert mario.value[0:6] == "RSSMRA"
        assert mario.value[6:11] == "80R01"
        assert mario.value[11:15] == "H501"

    def test_female(self) -> None:
        cf = FiscalCode.calculate("Maria", "Rossi", date(1985, 6, 12), "F", "F205")
        assert cf.value == "RSSMRA85H52F205C"

    def test_never_homocode(self, mario: FiscalCode) -> None:
        assert mario.is_homocode is False

    def test_date_shapes_agree(self) -> None:
        timestamp = int(datetime(1980, 10, 1, 12).timestamp())
        for dob in ("1980-10-01", date(1980, 10, 1), datetime(1980, 10, 1, 9, 0), timestamp, str(timestamp)):
            assert FiscalCode.calculate("Mario", "Rossi", dob, "M", "H501").value == MARIO_CF

    def test_city_code_normalized(self) -> None:
        assert FiscalCode.calculate("Mario", "Rossi", "1980-10-01", "m", " h501 ").value == MARIO_CF

    @pytest.mark.parametrize("city_code", ["H50", "1501", "H5011", "HH01", ""])
    def test_invalid_city_code(self, city_code: str) -> None:
        with pytest.raises(InvalidCityCodeError):
            FiscalCode.calculate("Mario", "Rossi", "1980-10-01", "M", city_code)

    def test_invalid_sex(self) -> None:
        with pytest.raises(InvalidSexError):
            FiscalCode.calculate("Mario", "Rossi", "1980-10-01", "X", "H501")

    def test_name_too_short(self) -> None:
        with pytest.raises(NameTooShortError):
            FiscalCode.calculate("M", "Rossi", "1980-10-01", "M", "H501")

    def test_unparseable_date(self) -> None:
        with pytest.raises(DateParseError):
            FiscalCode.calculate("Mario", "Rossi", "someday", "M", "H501")


class TestCalculateFromPerson:
    def test_mapping(self) -> None:
        assert FiscalCode.calculate_from_person(MARIO).value == MARIO_CF

    def test_field_map(self) -> None:
        person = {**MARIO, "date": MARIO["date_of_birth"]}
        del person["date_of_birth"]
        cf = FiscalCode.calculate_from_person(person, {"date_of_birth": "date"})
        assert cf.value == MARIO_CF

    def test_object(self) -> None:
        assert FiscalCode.calculate_from_person(SimpleNamespace(**MARIO)).value == MARIO_CF

    def test_person_input(self) -> None:
        assert FiscalCode.calculate_from_person(PersonInput(**MARIO)).value == MARIO_CF

    def test_missing_field(self) -> None:
        with pytest.raises(KeyError, match="city_code"):
            FiscalCode.calculate_from_person({k: v for k, v in MARIO.items() if k != "city_code"})


class TestParse:
    """Test parsing and rejection kinds."""

    def test_valid(self) -> None:
        assert FiscalCode.parse(MARIO_CF).value == MARIO_CF

    def test_lowercase_and_whitespace(self) -> None:
        assert FiscalCode.parse("  rssmra80r01h501b ").value == MARIO_CF

    @pytest.mark.parametrize(
        "code",
        ["INVALID", "", "RSSMRA80R01H501", "RSSMRA80R01H501BB", "RSSMRA80F01H501B", "RSSMRA8AR01H501B", "RSSMRA80R01H5O1B"],
    )
    def test_invalid_format(self, code: str) -> None:
        with pytest.raises(InvalidFormatError):
            FiscalCode.parse(code)

    def test_trailing_newline_is_not_valid_format(self) -> None:
        assert is_format_valid(MARIO_CF) is True
        assert is_format_valid(MARIO_CF + "\n") is False

    def test_date_mismatch_is_not_a_format_error(self) -> None:
        """Format is fine, but 1981 has no 29 February (check char is wrong too)."""
        code = "RSSMRA81B29H501B"
        assert is_format_valid(code) is True
        assert is_date_of_birth_correct(code) is False
        with pytest.raises(DateMismatchError) as exc_info:
            FiscalCode.parse(code)
        assert not isinstance(exc_info.value, InvalidFormatError)

    def test_date_mismatch_even_with_correct_check_char(self) -> None:
        with pytest.raises(DateMismatchError):
            FiscalCode.parse("RSSMRA81B29H501R")

    def test_check_digit_mismatch(self) -> None:
        with pytest.raises(CheckDigitMismatchError) as exc_info:
            FiscalCode.parse("RSSMRA80R01H501A")
        assert exc_info.value.code == "cdigit-not-match"

    def test_leap_day_needs_century_for_strict_check(self) -> None:
        code = "RSSMRA00B29H501Y"
        assert FiscalCode.parse(code).value == code
        assert FiscalCode.parse(code, 2000).value == code
        assert FiscalCode.parse(code, "20").value == code
        with pytest.raises(DateMismatchError):
            FiscalCode.parse(code, 1900)

    def test_homocode(self) -> None:
        cf = FiscalCode.parse("RSSMRAULRL1H50MM", 1900)
        assert cf.is_homocode is True
        assert cf.base_variation == MARIO_CF

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(InvalidFormatError):
            FiscalCode("RSSMRA")
        assert FiscalCode("rssmra80r01h501b").value == MARIO_CF

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="codicefiscale")
        with pytest.raises(CheckDigitMismatchError):
            FiscalCode.parse("RSSMRA80R01H501A")
        assert "cdigit-not-match" in caplog.text


class TestValueSemantics:
    def test_immutable(self, mario: FiscalCode) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            mario.value = "RSSMRA85H52F205C"  # type: ignore[misc]

    def test_equality_and_hash(self, mario: FiscalCode) -> None:
        other = FiscalCode.parse(MARIO_CF.lower())
        assert other == mario
        assert len({mario, other}) == 1

    def test_cached_fields_stable(self, mario: FiscalCode) -> None:
        assert mario.date_of_birth_raw is mario.date_of_birth_raw


class TestAccessors:
    """Test derived fields."""

    def test_female(self) -> None:
        cf = FiscalCode.parse("RSSMRA85H52F205C")
        assert cf.sex is Sex.FEMALE
        assert cf.city_code == "F205"
        assert cf.date_of_birth_raw == RawDateOfBirth(year="85", month="06", day="12")
        assert cf.date_of_birth(1900) == date(1985, 6, 12)

    def test_homocode_city_code(self) -> None:
        cf = FiscalCode.parse("RSSMRAULRLMHRLMK")
        assert cf.city_code == "H501"
        assert cf.sex is Sex.MALE
        assert cf.date_of_birth("19") == date(1980, 10, 1)

    def test_date_of_birth_missing_day(self) -> None:
        with pytest.raises(DateMismatchError):
            FiscalCode.parse("RSSMRA00B29H501Y").date_of_birth(1900)

    def test_probable_date_of_birth(self, mario: FiscalCode) -> None:
        assert mario.probable_date_of_birth(reference="2019-01-01") == date(1980, 10, 1)
        assert mario.probable_date_of_birth(18, "2019-01-01") == date(1980, 10, 1)

    def test_probable_date_uses_default_min_age(self, monkeypatch: pytest.MonkeyPatch) -> None:
        cf = FiscalCode.calculate("Mario", "Rossi", date(2012, 1, 1), "M", "H501")
        assert cf.probable_date_of_birth(reference=date(2020, 6, 1)) == date(2012, 1, 1)
        monkeypatch.setattr(settings, "default_min_age", 18)
        assert cf.probable_date_of_birth(reference=date(2020, 6, 1)) == date(1912, 1, 1)
        assert cf.probable_date_of_birth(5, reference=date(2020, 6, 1)) == date(2012, 1, 1)


class TestVariations:
    def test_single(self, mario: FiscalCode) -> None:
        assert mario.generate_variation(7) == "RSSMRA80R01HRLMZ"

    def test_from_homocode_instance(self) -> None:
        assert FiscalCode.parse("RSSMRAULRL1H50MM").generate_variation(1) == "RSSMRA80R01H50MT"

    def test_out_of_range(self, mario: FiscalCode) -> None:
        with pytest.raises(VariationOutOfRangeError):
            mario.generate_variation(128)

    def test_all(self, mario: FiscalCode) -> None:
        variations = mario.generate_variations()
        assert len(variations) == 127
        assert variations[112] == "RSSMRAULRL1H50MM"


class TestMatching:
    """Every variation must match the original person data."""

    def test_round_trip_all_variations(self, mario: FiscalCode) -> None:
        person_remapped = {**MARIO, "date": MARIO["date_of_birth"]}
        del person_remapped["date_of_birth"]

        for code in [*mario.generate_variations(), str(mario)]:
            cf = FiscalCode.parse(code)
            assert cf.match_name("Mario")
            assert cf.match_family_name("Rossi")
            assert cf.match_city_code("H501")
            assert cf.match_date_of_birth("1980-10-01")
            assert cf.match_sex("M")

            assert cf.validate(MARIO) is None
            assert cf.validate(person_remapped, {"date_of_birth": "date"}) is None
            assert cf.validate({"name": "Mario", "date_of_birth": "1980-10-01", "city_code": "H501"}, partial=True) is None
            assert cf.validate({"name": "Mario", "city_code": "Z000"}, partial=True) == ["city_code"]

            assert cf.city_code == "H501"
            assert cf.sex is Sex.MALE
            assert cf.date_of_birth(1900) == date(1980, 10, 1)

    def test_mismatches(self, mario: FiscalCode) -> None:
        assert mario.match_name("Luigi") is False
        assert mario.match_family_name("Verdi") is False
        assert mario.match_sex("F") is False
        assert mario.match_city_code("F205") is False
        assert mario.match_date_of_birth(date(1980, 10, 2)) is False

    def test_lenient_match_inputs(self, mario: FiscalCode) -> None:
        assert mario.match_sex(" m ") is True
        assert mario.match_city_code(" h501") is True
        assert mario.match_date_of_birth(date(2080, 10, 1)) is True

    def test_own_sex_value_round_trips(self, mario: FiscalCode) -> None:
        """The Sex returned by the accessor is accepted back as input."""
        assert mario.match_sex(mario.sex) is True
        assert mario.match_sex(Sex.FEMALE) is False
        assert mario.validate({**MARIO, "sex": mario.sex}) is None
        cf = FiscalCode.calculate("Mario", "Rossi", "1980-10-01", Sex.MALE, "H501")
        assert cf.value == MARIO_CF

    def test_unusable_inputs_do_not_match(self, mario: FiscalCode) -> None:
        assert mario.match_name("M") is False
        assert mario.match_family_name("") is False
        assert mario.match_sex("unknown") is False

    def test_unparseable_date_raises(self, mario: FiscalCode) -> None:
        with pytest.raises(DateParseError):
            mario.match_date_of_birth("not a date")

    def test_female_single_digit_day(self) -> None:
        cf = FiscalCode.calculate("Anna", "Bianchi", "1990-03-05", "F", "L219")
        assert cf.match_date_of_birth("1990-03-05") is True
        assert cf.date_of_birth_raw.day == "05"


class TestValidate:
    """Test person validation."""

    def test_all_match(self, mario: FiscalCode) -> None:
        assert mario.validate(MARIO) is None

    def test_reports_every_mismatch(self, mario: FiscalCode) -> None:
        person = {**MARIO, "name": "Luigi", "sex": "F"}
        assert mario.validate(person) == ["name", "sex"]

    def test_missing_fields_without_partial(self, mario: FiscalCode) -> None:
        assert mario.validate({"name": "Mario"}) == ["family_name", "date_of_birth", "sex", "city_code"]

    def test_partial_skips_missing(self, mario: FiscalCode) -> None:
        assert mario.validate({"family_name": "Rossi"}, partial=True) is None

    def test_object_person(self, mario: FiscalCode) -> None:
        assert mario.validate(PersonInput(**MARIO)) is None
        assert mario.validate(SimpleNamespace(name="Mario"), partial=True) is None

    def test_never_raises(self, mario: FiscalCode) -> None:
        person = {**MARIO, "date_of_birth": "not a date", "name": None, "sex": "?"}
        assert mario.validate(person) == ["name", "date_of_birth", "sex"]
