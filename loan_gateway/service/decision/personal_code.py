"""
Personal Code Parsing for the Loan Decision Engine.

Extracts the date of birth and the credit segment value from an
11-digit personal identity code and computes the applicant's age.

Code layout: G YY MM DD SSS C
  - G:   century and sex indicator (1-8)
  - YY:  year of birth within the century
  - MM:  month of birth
  - DD:  day of birth
  - SSS: sequence number
  - C:   check digit

Structural and checksum validation is done by a PersonalCodeValidator
before parsing; the parser still refuses anything it cannot decode.
"""

from datetime import date

from loan_gateway.domain.exceptions import InvalidPersonalCodeException

from .models import PersonalCodeInfo

PERSONAL_CODE_LENGTH = 11

CENTURY_BY_INDICATOR: dict[str, int] = {
    "1": 1800, "2": 1800,
    "3": 1900, "4": 1900,
    "5": 2000, "6": 2000,
    "7": 2100, "8": 2100,
}


def parse_birth_date(personal_code: str) -> date:
    """
    Decode the date of birth from a personal code.

    Args:
        personal_code: 11-digit personal identity code

    Returns:
        The encoded date of birth

    Raises:
        InvalidPersonalCodeException: If the century indicator is unknown
            or the encoded date does not exist
    """
    century = CENTURY_BY_INDICATOR.get(personal_code[0])
    if century is None:
        raise InvalidPersonalCodeException(
            f"Invalid century indicator in personal code: {personal_code[0]}"
        )

    year = century + int(personal_code[1:3])
    month = int(personal_code[3:5])
    day = int(personal_code[5:7])

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidPersonalCodeException(
            f"Invalid birth date in personal code: {year}-{month:02d}-{day:02d}"
        )


def parse_personal_code(personal_code: str) -> PersonalCodeInfo:
    """
    Parse a personal code into the values used by the decision engine.

    Args:
        personal_code: 11-digit personal identity code

    Returns:
        PersonalCodeInfo with the birth date and the segment value
        (last four characters as an integer)

    Raises:
        InvalidPersonalCodeException: If the code cannot be decoded
    """
    if len(personal_code) != PERSONAL_CODE_LENGTH or not personal_code.isdigit():
        raise InvalidPersonalCodeException()

    return PersonalCodeInfo(
        birth_date=parse_birth_date(personal_code),
        segment_value=int(personal_code[-4:]),
    )


def calculate_age(birth_date: date, today: date) -> int:
    """
    Calculate age in completed years.

    Args:
        birth_date: Date of birth
        today: Evaluation date

    Returns:
        Whole years between birth_date and today
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
