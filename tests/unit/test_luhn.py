"""
Unit tests for Luhn check digit calculation.
"""

from idcheck.swedish.luhn import luhn_checksum, validate_check_digit


class TestLuhnChecksum:
    """Tests for Luhn checksum calculation."""

    def test_known_checksums(self):
        """Test with known valid checksums."""
        assert luhn_checksum("811218987") == 6
        assert luhn_checksum("850709980") == 5
        # Spotify AB: 556703-7485
        assert luhn_checksum("556703748") == 5

    def test_all_zeros(self):
        """Test checksum of all zeros."""
        assert luhn_checksum("000000000") == 0

    def test_separator_does_not_flip_weighting(self):
        """Test that '-' and '+' are skipped without changing the weights."""
        assert luhn_checksum("811218-987") == 6
        assert luhn_checksum("121218+987") == 0

    def test_result_is_single_digit(self):
        """Test that the checksum is always 0-9."""
        for body in ("123456789", "999999999", "100000000"):
            assert 0 <= luhn_checksum(body) <= 9


class TestValidateCheckDigit:
    """Tests for check digit verification."""

    def test_valid_personnummer(self):
        """Test known valid test personnummer."""
        assert validate_check_digit("8507099805", 0)

    def test_altered_check_digit(self):
        """Test that changing the last digit fails."""
        assert not validate_check_digit("8507099804", 0)
        assert not validate_check_digit("8507099806", 0)

    def test_with_separator(self):
        """Test verification over input containing a separator."""
        assert validate_check_digit("811218-9876", 0)
        assert validate_check_digit("19811218-9876", 2)

    def test_offset_skips_century(self):
        """Test that the century digits are excluded when offset is 2."""
        assert validate_check_digit("198112189876", 2)
        assert not validate_check_digit("198112189876", 0)

    def test_organisationsnummer_prefix(self):
        """Test that the '16' prefix is skipped when offset is 2."""
        assert validate_check_digit("165567037485", 2)

    def test_non_digit_check_character(self):
        """Test that a non-digit check character fails."""
        assert not validate_check_digit("811218987X", 0)
