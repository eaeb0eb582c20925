"""Error taxonomy for the codice fiscale codec.

Each error carries a stable machine-readable ``code`` and a ``context`` dict
with the offending values, so bulk callers can log and continue per item.
"""

from __future__ import annotations

from typing import Any


class CodiceFiscaleError(Exception):
    """Base class for every codec failure."""

    code = "codice-fiscale-error"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context


class InvalidFormatError(CodiceFiscaleError):
    """The candidate string does not match the 16-character layout."""

    code = "invalid-format"


class DateMismatchError(CodiceFiscaleError):
    """The embedded date of birth is not a real calendar day."""

    code = "dob-not-match"


class CheckDigitMismatchError(CodiceFiscaleError):
    """Format and date are fine but the check character is wrong."""

    code = "cdigit-not-match"


class InvalidCityCodeError(CodiceFiscaleError):
    """Municipality code is not one letter followed by three digits."""

    code = "wrong-city-code-format"


class InvalidSexError(CodiceFiscaleError):
    code = "sex-wrong-format"


class NameTooShortError(CodiceFiscaleError):
    """Name or family name has fewer than 2 letters after folding."""

    code = "name-or-familyname-too-short"


class VariationOutOfRangeError(CodiceFiscaleError):
    code = "variation-not-exists"


class DateParseError(CodiceFiscaleError):
    """A date-like input could not be interpreted."""

    code = "date-parse-failed"


class CheckDigitInputTooShortError(CodiceFiscaleError):
    code = "too-short-for-checkdigit"
