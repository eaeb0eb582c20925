"""Static lookup tables for the codice fiscale.

Checksum tables per Decreto MEF 12/03/1974. Omocodia (homocode) substitution
letters per DM 23/12/1976. Everything here is read-only.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
VOWELS = "AEIOU"

# Index 0 → January, index 11 → December
MONTH_LETTERS = "ABCDEHLMPRST"

# ---------------------------------------------------------------------------
# Diacritic folding (applied before uppercasing)
# ---------------------------------------------------------------------------

SPECIAL_CHARS: dict[str, str] = {
    "Ä": "AE", "ä": "AE", "Æ": "AE", "æ": "AE",
    "Ö": "OE", "ö": "OE", "Œ": "OE", "œ": "OE",
    "Ü": "UE", "ü": "UE", "ß": "SS",
    "à": "A", "á": "A", "â": "A", "ã": "A", "ç": "C",
    "è": "E", "é": "E", "ê": "E", "ë": "E",
    "ì": "I", "í": "I", "î": "I", "ï": "I", "ñ": "N",
    "ò": "O", "ó": "O", "ô": "O", "õ": "O",
    "ù": "U", "ú": "U", "û": "U", "ý": "Y", "ÿ": "Y",
    "č": "C", "š": "S", "ž": "Z",
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ç": "C",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I", "Ñ": "N",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O",
    "Ù": "U", "Ú": "U", "Û": "U", "Ý": "Y",
    "Č": "C", "Š": "S", "Ž": "Z",
}

# ---------------------------------------------------------------------------
# Omocodia
# ---------------------------------------------------------------------------

HOMOCODE_POSITIONS: tuple[int, ...] = (6, 7, 9, 10, 12, 13, 14)

HOMOCODE_LETTER_TO_DIGIT: dict[str, str] = {
    "L": "0", "M": "1", "N": "2", "P": "3", "Q": "4",
    "R": "5", "S": "6", "T": "7", "U": "8", "V": "9",
}

HOMOCODE_DIGIT_TO_LETTER: dict[str, str] = {
    digit: letter for letter, digit in HOMOCODE_LETTER_TO_DIGIT.items()
}

# ---------------------------------------------------------------------------
# Check character
# ---------------------------------------------------------------------------

ODD_VALUES: dict[str, int] = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}

EVEN_VALUES: dict[str, int] = {
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
}

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_DIGIT_OR_HOMOCODE = "[0-9LMNPQRSTUV]"

CF_PATTERN = re.compile(
    rf"^[A-Z]{{6}}{_DIGIT_OR_HOMOCODE}{{2}}[{MONTH_LETTERS}]{_DIGIT_OR_HOMOCODE}{{2}}"
    rf"[A-Z]{_DIGIT_OR_HOMOCODE}{{3}}[A-Z]$"
)

CITY_CODE_PATTERN = re.compile(r"^[A-Z]\d{3}$")
