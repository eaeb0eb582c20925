"""Tests for the family-name and given-name encoders.

Tests cover:
- Consonant/vowel/X selection for family names
- The "skip the 2nd consonant" rule for given names
- Diacritic folding and non-letter stripping
- Too-short names
"""

from __future__ import annotations

import pytest

from codicefiscale.encoders.names import (
    encode_family_name,
    encode_given_name,
    is_vowel,
    normalize_name,
)
from codicefiscale.exceptions import NameTooShortError


class TestNormalizeName:
    """Test folding and cleanup before encoding."""

    def test_uppercase(self) -> None:
        assert normalize_name("Rossi") == "ROSSI"

    def test_strips_apostrophes_and_spaces(self) -> None:
        assert normalize_name("D'Angelo") == "DANGELO"
        assert normalize_name("De Luca") == "DELUCA"

    def test_umlauts_become_digraphs(self) -> None:
        assert normalize_name("Müller") == "MUELLER"
        assert normalize_name("Strauß") == "STRAUSS"
        assert normalize_name("Æsir") == "AESIR"

    def test_accents_become_bare_letters(self) -> None:
        assert normalize_name("Niccolò") == "NICCOLO"
        assert normalize_name("Ñuñez") == "NUNEZ"
        assert normalize_name("Čapek") == "CAPEK"

    def test_digits_dropped(self) -> None:
        assert normalize_name("Rossi2") == "ROSSI"


class TestFamilyName:
    """Test family-name encoding."""

    def test_three_consonants(self) -> None:
        assert encode_family_name("Rossi") == "RSS"

    def test_consonants_then_vowels(self) -> None:
        assert encode_family_name("Bove") == "BVO"

    def test_padding_with_x(self) -> None:
        assert encode_family_name("Fo") == "FOX"
        assert encode_family_name("Ai") == "AIX"

    def test_folded_before_encoding(self) -> None:
        assert encode_family_name("Müller") == "MLL"
        assert encode_family_name("D'Angelo") == "DNG"
        assert encode_family_name("Rè") == "REX"

    def test_single_letter_rejected(self) -> None:
        with pytest.raises(NameTooShortError):
            encode_family_name("X")

    def test_empty_after_folding_rejected(self) -> None:
        with pytest.raises(NameTooShortError) as exc_info:
            encode_family_name("'  -")
        assert exc_info.value.code == "name-or-familyname-too-short"


class TestGivenName:
    """Test given-name encoding."""

    def test_three_consonants_uses_family_rule(self) -> None:
        assert encode_given_name("Mario") == "MRA"
        assert encode_given_name("Maria") == "MRA"

    def test_four_consonants_skips_second(self) -> None:
        """Gianfranco: G N F R N C → G F R."""
        assert encode_given_name("Gianfranco") == "GFR"
        assert encode_given_name("Alberto") == "LRT"

    def test_few_consonants(self) -> None:
        assert encode_given_name("Luca") == "LCU"
        assert encode_given_name("Ugo") == "GUO"
        assert encode_given_name("Al") == "LAX"

    def test_folded_name(self) -> None:
        """NICCOLO has N C C L: 1st, 3rd and 4th consonant."""
        assert encode_given_name("Niccolò") == "NCL"

    def test_too_short(self) -> None:
        with pytest.raises(NameTooShortError):
            encode_given_name("A")


class TestIsVowel:
    def test_vowels(self) -> None:
        assert all(is_vowel(c) for c in "AEIOU")

    def test_consonant(self) -> None:
        assert is_vowel("B") is False

    def test_not_a_single_letter(self) -> None:
        with pytest.raises(AssertionError):
            is_vowel("AB")
