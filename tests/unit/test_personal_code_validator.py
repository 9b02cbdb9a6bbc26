"""
Unit Tests for the Estonian personal code validator.

These tests verify:
1. Check digit calculation with both weight passes
2. Format checks (length, digits, century indicator)
3. Birth date checks
"""

import pytest

from loan_gateway.infrastructure.validators import (
    EstonianPersonalCodeValidator,
    calculate_check_digit,
)


@pytest.fixture
def validator() -> EstonianPersonalCodeValidator:
    return EstonianPersonalCodeValidator()


# =============================================================================
# Check Digit Tests
# =============================================================================

class TestCalculateCheckDigit:
    """Tests for calculate_check_digit()."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("37605030299", 9),
            ("50307172740", 0),
            ("35006069515", 5),
            ("49002010976", 6),
        ],
    )
    def test_first_pass(self, code: str, expected: int):
        assert calculate_check_digit(code) == expected

    def test_second_pass(self):
        """First pass gives remainder 10, second pass gives 0."""
        assert calculate_check_digit("39001010110") == 0
        assert calculate_check_digit("38411266610") == 0

    def test_both_passes_ten(self):
        """Remainder 10 on both passes yields check digit 0."""
        assert calculate_check_digit("39001010590") == 0

    def test_only_first_ten_digits_used(self):
        assert calculate_check_digit("3841126661") == calculate_check_digit("38411266610")


# =============================================================================
# Validator Tests
# =============================================================================

class TestEstonianPersonalCodeValidator:
    """Tests for EstonianPersonalCodeValidator.is_valid()."""

    @pytest.mark.parametrize(
        "code",
        [
            "37605030299",
            "50307172740",
            "38411266610",
            "35006069515",
            "49002010976",
            "39001010110",
            "39001010590",
        ],
    )
    def test_valid_codes(self, validator: EstonianPersonalCodeValidator, code: str):
        assert validator.is_valid(code) is True

    @pytest.mark.parametrize(
        "code",
        [
            "12345678901",   # wrong check digit
            "39002010976",   # wrong check digit
            "39001010595",   # wrong check digit after two passes
        ],
    )
    def test_wrong_check_digit(self, validator: EstonianPersonalCodeValidator, code: str):
        assert validator.is_valid(code) is False

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "3841126661",
            "384112666100",
            "3841126661A",
            "38411 66610",
            "38411266610\n",
            "+3841126661",
        ],
    )
    def test_malformed_format(self, validator: EstonianPersonalCodeValidator, code: str):
        assert validator.is_valid(code) is False

    @pytest.mark.parametrize("code", ["08411266610", "98411266610"])
    def test_unknown_century_indicator(self, validator: EstonianPersonalCodeValidator, code: str):
        assert validator.is_valid(code) is False

    def test_impossible_birth_date(self, validator: EstonianPersonalCodeValidator):
        """38502300007 has a correct check digit but encodes February 30th."""
        assert calculate_check_digit("38502300007") == 7
        assert validator.is_valid("38502300007") is False

    def test_non_string_rejected(self, validator: EstonianPersonalCodeValidator):
        assert validator.is_valid(38411266610) is False
