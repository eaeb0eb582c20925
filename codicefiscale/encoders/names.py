"""Family-name and given-name blocks (positions 0–5).

Rules:
  - Family name: consonants in order, then vowels, then X, up to 3 letters.
  - Given name: with 4+ consonants take the 1st, 3rd and 4th; otherwise
    the family-name rule.
Names are folded first: known diacritics → ASCII (Ä → AE, ñ → N, ...),
uppercase, and everything outside A–Z is dropped ("D'Angelo" → "DANGELO").
"""

from __future__ import annotations

import re

from codicefiscale.exceptions import NameTooShortError
from codicefiscale.tables import ALPHABET, SPECIAL_CHARS, VOWELS

_NON_LETTERS = re.compile(r"[^A-Z]")
_FOLD_TABLE = str.maketrans(SPECIAL_CHARS)

MIN_NAME_LENGTH = 2


def normalize_name(text: str) -> str:
    """Fold diacritics, uppercase and strip everything but A–Z."""
    return _NON_LETTERS.sub("", text.translate(_FOLD_TABLE).upper())


def is_vowel(char: str) -> bool:
    assert len(char) == 1 and char in ALPHABET, f"not a normalized letter: {char!r}"
    return char in VOWELS


def _encode(folded: str, original: str) -> str:
    if len(folded) < MIN_NAME_LENGTH:
        raise NameTooShortError(
            f"Name too short to encode: {original!r}",
            name=original,
        )

    consonants = [c for c in folded if not is_vowel(c)]
    vowels = [c for c in folded if is_vowel(c)]

    code = "".join(consonants + vowels)[:3]
    return code.ljust(3, "X")


def encode_family_name(text: str) -> str:
    """Encode a family name into its 3-letter block.

    Raises:
        NameTooShortError: If fewer than 2 letters remain after folding.
    """
    return _encode(normalize_name(text), text)


def encode_given_name(text: str) -> str:
    """Encode a given name into its 3-letter block.

    "Gianfranco" has consonants G N F R N C, so the 2nd (N) is skipped: GFR.

    Raises:
        NameTooShortError: If fewer than 2 letters remain after folding.
    """
    folded = normalize_name(text)
    consonants = [c for c in folded if not is_vowel(c)]
    if len(consonants) >= 4:
        return consonants[0] + consonants[2] + consonants[3]
    return _encode(folded, text)
