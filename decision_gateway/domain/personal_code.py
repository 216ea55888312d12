"""Estonian personal identification code (isikukood) validation and decoding.

Code format: GYYMMDDSSSC
  - G:    century and sex (1/2 = 1800s, 3/4 = 1900s, 5/6 = 2000s; odd = male)
  - YY:   year of birth within the century
  - MM:   month of birth
  - DD:   day of birth
  - SSS:  serial number for people born on the same day
  - C:    check digit (two-pass modulo 11)
"""

import re
from datetime import date
from typing import Optional

from decision_gateway.domain.exceptions import AgeRestrictionError, InvalidPersonalCodeError
from decision_gateway.utils.date_utils import full_years_between

_CODE_PATTERN = re.compile(r"[1-6][0-9]{10}")

FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

# Leading digit -> first year of the birth century. None means the holder
# was born before 1900 and cannot be a living applicant.
CENTURY_BY_DIGIT: dict[str, Optional[int]] = {
    "1": None,
    "2": None,
    "3": 1900,
    "4": 1900,
    "5": 2000,
    "6": 2000,
}


def calculate_check_digit(first_ten: str) -> int:
    """Compute the check digit for the first ten digits of a personal code."""
    digits = [int(ch) for ch in first_ten]
    remainder = sum(d * w for d, w in zip(digits, FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECOND_PASS_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


class PersonalCodeValidator:
    """Format, birth date and checksum validation of Estonian personal codes"""

    def is_valid(self, personal_code: Optional[str]) -> bool:
        if personal_code is None or not _CODE_PATTERN.fullmatch(personal_code):
            return False

        year = 1800 + (int(personal_code[0]) - 1) // 2 * 100 + int(personal_code[1:3])
        try:
            date(year, int(personal_code[3:5]), int(personal_code[5:7]))
        except ValueError:
            return False

        return calculate_check_digit(personal_code[:10]) == int(personal_code[10])


def decode_birth_date(personal_code: str) -> date:
    """
    Decode the birth date encoded in a personal code.

    Raises:
        AgeRestrictionError: Code belongs to someone born in the 1800s
        InvalidPersonalCodeError: Unknown century digit or impossible date
    """
    century_digit = personal_code[:1]
    if century_digit not in CENTURY_BY_DIGIT:
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    century = CENTURY_BY_DIGIT[century_digit]
    if century is None:
        raise AgeRestrictionError("You are too old to be alive!")

    try:
        return date(
            century + int(personal_code[1:3]),
            int(personal_code[3:5]),
            int(personal_code[5:7]),
        )
    except ValueError as e:
        raise InvalidPersonalCodeError("Invalid personal ID code!") from e


def get_age(personal_code: str, today: date | None = None) -> int:
    """Age of the code holder in whole years on `today` (default: current date)"""
    birth_date = decode_birth_date(personal_code)
    if today is None:
        today = date.today()
    return full_years_between(birth_date, today)
