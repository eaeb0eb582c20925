"""Check character and omocodia calculators."""

from codicefiscale.calculators.check_digit import compute_check_digit, has_valid_check_digit
from codicefiscale.calculators.homocode import (
    base_variation,
    generate_all_variations,
    generate_variation,
    is_homocode,
)

__all__ = [
    "base_variation",
    "compute_check_digit",
    "generate_all_variations",
    "generate_variation",
    "has_valid_check_digit",
    "is_homocode",
]
