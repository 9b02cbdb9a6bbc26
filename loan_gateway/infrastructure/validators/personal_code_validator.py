"""Estonian personal identification code (isikukood) validator.

Pure Python. Checks the 11-digit format, the encoded birth date and the
check digit.

Format: G YYMMDD SSS C
  - G:      century and sex (1-8)
  - YYMMDD: date of birth
  - SSS:    sequence number
  - C:      check digit (modulo 11, two weight passes)

Reference: EVS 585:2007.
"""

import re

from loan_gateway.domain.exceptions import InvalidPersonalCodeException
from loan_gateway.domain.interfaces import PersonalCodeValidator
from loan_gateway.service.decision.personal_code import parse_birth_date

_CODE_PATTERN = re.compile(r"[1-8][0-9]{10}")

# Checksum weights; the second set is used when the first gives remainder 10
FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def calculate_check_digit(personal_code: str) -> int:
    """Calculate the check digit from the first ten digits of a personal code."""
    digits = [int(c) for c in personal_code[:10]]

    remainder = sum(d * w for d, w in zip(digits, FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECOND_PASS_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


class EstonianPersonalCodeValidator(PersonalCodeValidator):
    """Validates Estonian personal codes by format, birth date and check digit."""

    def is_valid(self, personal_code: str) -> bool:
        if not isinstance(personal_code, str) or not _CODE_PATTERN.fullmatch(personal_code):
            return False

        try:
            parse_birth_date(personal_code)
        except InvalidPersonalCodeException:
            return False

        return calculate_check_digit(personal_code) == int(personal_code[10])
