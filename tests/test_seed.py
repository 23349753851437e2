"""
Unit Tests for room codes and seed derivation.
"""

import random

import pytest

from hotjava.challenges.seed import (
    ROOM_CODE_ALPHABET,
    ROOM_CODE_LENGTH,
    derive_seed,
    generate_room_code,
    normalize_room_code,
    seed_for_room,
)


class TestDeriveSeed:
    """Test suite for derive_seed."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("A", 65),
            ("AB", 2081),
            ("hello", 99162322),
            ("", 0),
        ],
    )
    def test_matches_rolling_hash(self, text, expected):
        """Test the multiplier-31 rolling hash on known values."""
        assert derive_seed(text) == expected

    def test_same_input_same_seed(self):
        """Test that derivation is deterministic."""
        assert derive_seed("K7Q2Z") == derive_seed("K7Q2Z")

    def test_distinct_codes_differ(self):
        """Test that nearby codes give different seeds."""
        assert derive_seed("ABCDE") != derive_seed("ABCDF")
        assert derive_seed("ABCDE") != derive_seed("EDCBA")

    def test_wraps_to_32_bits(self):
        """Test that long inputs wrap instead of growing without bound."""
        seed = derive_seed("Z" * 200)
        assert 0 <= seed <= 2**31

    def test_minimum_int32_becomes_positive(self):
        """Test the accumulator hitting -2**31 still yields a non-negative seed."""
        assert derive_seed("polygenelubricants") == 2**31

    def test_non_bmp_characters_use_utf16_units(self):
        """Test that characters outside the BMP hash as surrogate pairs."""
        assert derive_seed("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_always_non_negative(self):
        """Test many random codes all produce non-negative seeds."""
        rng = random.Random(7)
        for _ in range(200):
            assert derive_seed(generate_room_code(rng=rng)) >= 0


class TestRoomCodes:
    """Test suite for room code helpers."""

    def test_normalize_room_code(self):
        """Test trimming and uppercasing."""
        assert normalize_room_code("  ab12c ") == "AB12C"

    def test_seed_for_room_ignores_case_and_spacing(self):
        """Test that players typing the code differently share a seed."""
        assert seed_for_room(" abcde") == seed_for_room("ABCDE") == derive_seed("ABCDE")

    @pytest.mark.parametrize("code", ["", "   "])
    def test_seed_for_blank_room_rejected(self, code):
        """Test that a blank room code is refused."""
        with pytest.raises(ValueError):
            seed_for_room(code)

    def test_generate_room_code_shape(self):
        """Test length and alphabet of generated codes."""
        code = generate_room_code()
        assert len(code) == ROOM_CODE_LENGTH
        assert all(c in ROOM_CODE_ALPHABET for c in code)
        assert code == code.upper()

    def test_generate_room_code_with_seeded_rng(self):
        """Test that a seeded random source gives repeatable codes."""
        assert generate_room_code(rng=random.Random(1)) == generate_room_code(rng=random.Random(1))

    def test_generate_room_code_custom_length(self):
        """Test a non-default length."""
        assert len(generate_room_code(length=8)) == 8
