"""
Unit tests for strict date validation.
"""

import pytest

from idcheck.swedish.dates import validate_date


class TestValidateDate:
    """Tests for validate_date."""

    def test_non_leap_year(self):
        """Test Feb 29 in a non-leap year."""
        assert not validate_date("20230229")

    def test_leap_year(self):
        """Test Feb 29 in a leap year."""
        assert validate_date("20240229")

    def test_century_leap_rules(self):
        """Test that 1900 is not a leap year and 2000 is."""
        assert not validate_date("19000229")
        assert validate_date("20000229")

    def test_feb_30_short_year(self):
        """Test Feb 30 with two-digit year."""
        assert not validate_date("230230")

    def test_end_of_year(self):
        """Test last day of year."""
        assert validate_date("19991231")

    def test_two_digit_year_resolves_to_2000s(self):
        """Test that two-digit years use 20YY for leap years."""
        assert validate_date("000229")
        assert validate_date("960229")
        assert not validate_date("010229")

    @pytest.mark.parametrize(
        "digits", ["20231301", "20230001", "20230100", "20230431", "811232", "811278"]
    )
    def test_out_of_range_month_or_day(self, digits):
        """Test that months and days never roll over."""
        assert not validate_date(digits)

    def test_year_zero(self):
        """Test that year 0000 is a valid proleptic leap year."""
        assert validate_date("00000101")
        assert validate_date("00000229")
        assert not validate_date("00000230")

    @pytest.mark.parametrize("digits", ["", "8112", "8112181", "198112181", "1981121898"])
    def test_wrong_length(self, digits):
        """Test that only 6 or 8 digits are accepted."""
        assert not validate_date(digits)

    @pytest.mark.parametrize("digits", ["81121*", "1981-218", "2023 101", "２０２３０１０１"])
    def test_non_digits(self, digits):
        """Test that non-digit characters return False without raising."""
        assert not validate_date(digits)
