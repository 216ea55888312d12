"""Domain-specific exceptions

Two categories with different propagation:
- InputValidationError: bad request input, folded into Decision.error_message
- LoanEligibilityError: the applicant cannot get a loan, always raised
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InputValidationError(DomainException):
    """Request input failed validation"""

    pass


class InvalidPersonalCodeError(InputValidationError):
    """Personal ID code is malformed or fails the checksum"""

    pass


class InvalidLoanAmountError(InputValidationError):
    """Requested loan amount is outside the allowed range"""

    pass


class InvalidLoanPeriodError(InputValidationError):
    """Requested loan period is outside the allowed range"""

    pass


class InvalidCountryError(InputValidationError):
    """Loans are not offered in the given country"""

    pass


class LoanEligibilityError(DomainException):
    """Applicant is not eligible for any loan"""

    pass


class AgeRestrictionError(LoanEligibilityError):
    """Applicant is too young or too old"""

    pass


class NoValidLoanError(LoanEligibilityError):
    """No loan period within bounds reaches the minimum amount"""

    pass
