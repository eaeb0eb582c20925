"""Check character (position 16) of the codice fiscale.

Characters at odd positions (1-indexed) are valued through ODD_VALUES, those
at even positions through EVEN_VALUES; the sum mod 26 picks the letter.
"""

from __future__ import annotations

from codicefiscale.exceptions import CheckDigitInputTooShortError, InvalidFormatError
from codicefiscale.tables import ALPHABET, EVEN_VALUES, ODD_VALUES

CHECKED_LENGTH = 15


def compute_check_digit(chars: str) -> str:
    """Compute the check character over the first 15 characters.

    Args:
        chars: Code prefix, any case; anything past position 15 is ignored.

    Returns:
        A single letter A–Z.

    Raises:
        CheckDigitInputTooShortError: If fewer than 15 characters are given.
        InvalidFormatError: If a checked character is not A–Z or 0–9.
    """
    if len(chars) < CHECKED_LENGTH:
        raise CheckDigitInputTooShortError(
            f"Need {CHECKED_LENGTH} characters for the check digit, got {len(chars)}",
            length=len(chars),
        )

    prefix = chars[:CHECKED_LENGTH].upper()
    if any(char not in EVEN_VALUES for char in prefix):
        raise InvalidFormatError(
            f"Check digit input must be alphanumeric: {chars!r}",
            code=chars,
        )

    total = 0
    for i in range(CHECKED_LENGTH):
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES[prefix[i]]
        else:  # even position (1-indexed)
            total += EVEN_VALUES[prefix[i]]
    return ALPHABET[total % 26]


def has_valid_check_digit(code: str) -> bool:
    """Validate the check character of a full 16-character code."""
    if len(code) != CHECKED_LENGTH + 1:
        return False
    if any(char not in EVEN_VALUES for char in code):
        return False
    return compute_check_digit(code) == code[CHECKED_LENGTH]
