"""Omocodia (homocode) variations.

When two people would get the same code, the tax office replaces digits at
the seven numeric positions with letters (0 → L, 1 → M, ... 9 → V), starting
from the rightmost one. Variations are numbered with a binary increment
pattern over those positions, rightmost position = least significant bit:

    XXXXXX00X00X001X   → variation 1
    XXXXXX00X00X010X   → variation 2
    XXXXXX00X00X011X   → variation 3
    ...
    XXXXXX11X11X111X   → variation 127
"""

from __future__ import annotations

from codicefiscale.calculators.check_digit import compute_check_digit
from codicefiscale.exceptions import VariationOutOfRangeError
from codicefiscale.tables import (
    HOMOCODE_DIGIT_TO_LETTER,
    HOMOCODE_LETTER_TO_DIGIT,
    HOMOCODE_POSITIONS,
)

MIN_VARIATION = 1
MAX_VARIATION = 2 ** len(HOMOCODE_POSITIONS) - 1  # 127

# Bit j of the variation index controls _BIT_POSITIONS[j]
_BIT_POSITIONS: tuple[int, ...] = tuple(reversed(HOMOCODE_POSITIONS))


def is_homocode(code: str) -> bool:
    """True if any numeric position carries a substitution letter."""
    return any(code[i] in HOMOCODE_LETTER_TO_DIGIT for i in HOMOCODE_POSITIONS)


def base_variation(code: str) -> str:
    """Return the code with every substitution letter turned back into its digit.

    The check character is recomputed when something was substituted, so the
    base of a genuine variation is the genuine original code. A code without
    substitutions is returned unchanged.
    """
    if not is_homocode(code):
        return code
    chars = list(code)
    for i in HOMOCODE_POSITIONS:
        if chars[i] in HOMOCODE_LETTER_TO_DIGIT:
            chars[i] = HOMOCODE_LETTER_TO_DIGIT[chars[i]]
    if len(chars) > 15:
        chars[15] = compute_check_digit("".join(chars))
    return "".join(chars)


def generate_variation(code: str, index: int) -> str:
    """Build homocode variation ``index`` of a code.

    Args:
        code: A 16-character code; it is reduced to its base variation first.
        index: Variation number, 1–127.

    Returns:
        The substituted code with a recomputed check character.

    Raises:
        VariationOutOfRangeError: If ``index`` is outside 1–127.
    """
    if not MIN_VARIATION <= index <= MAX_VARIATION:
        raise VariationOutOfRangeError(
            f"Variation {index} does not exist (valid: {MIN_VARIATION}–{MAX_VARIATION})",
            num=index,
        )

    chars = list(base_variation(code))
    for bit, position in enumerate(_BIT_POSITIONS):
        if index >> bit & 1:
            chars[position] = HOMOCODE_DIGIT_TO_LETTER[chars[position]]

    chars[15] = compute_check_digit("".join(chars))
    return "".join(chars)


def generate_all_variations(code: str) -> list[str]:
    """Return variations 1–127 of a code, in index order."""
    return [generate_variation(code, i) for i in range(MIN_VARIATION, MAX_VARIATION + 1)]
