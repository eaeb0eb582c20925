"""Italian codice fiscale codec — calculate, parse, validate, omocodia."""

from codicefiscale.decoders import decode_cf
from codicefiscale.enums import PersonField, Sex
from codicefiscale.exceptions import (
    CheckDigitInputTooShortError,
    CheckDigitMismatchError,
    CodiceFiscaleError,
    DateMismatchError,
    DateParseError,
    InvalidCityCodeError,
    InvalidFormatError,
    InvalidSexError,
    NameTooShortError,
    VariationOutOfRangeError,
)
from codicefiscale.fiscal_code import FiscalCode, is_date_of_birth_correct, is_format_valid
from codicefiscale.schemas import CfResult, PersonInput, RawDateOfBirth

__all__ = [
    "CfResult",
    "CheckDigitInputTooShortError",
    "CheckDigitMismatchError",
    "CodiceFiscaleError",
    "DateMismatchError",
    "DateParseError",
    "FiscalCode",
    "InvalidCityCodeError",
    "InvalidFormatError",
    "InvalidSexError",
    "NameTooShortError",
    "PersonField",
    "PersonInput",
    "RawDateOfBirth",
    "Sex",
    "VariationOutOfRangeError",
    "decode_cf",
    "is_date_of_birth_correct",
    "is_format_valid",
]
