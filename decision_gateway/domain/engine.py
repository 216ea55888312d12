"""Loan decision engine - core business logic for loan offers"""

from datetime import date
from typing import Optional

from decision_gateway.domain.constants import DEFAULT_CONSTANTS, DecisionEngineConstants
from decision_gateway.domain.exceptions import (
    AgeRestrictionError,
    InputValidationError,
    InvalidCountryError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.models import Decision
from decision_gateway.domain.personal_code import PersonalCodeValidator, get_age
from decision_gateway.domain.scoring import get_credit_modifier, highest_valid_loan_amount


class DecisionEngine:
    """
    Calculates the largest loan amount and the matching period a customer can get.

    The amount depends on the customer's credit modifier, which is derived from
    the last four digits of their personal ID code. The engine holds no state
    between calls; constants and validator are read-only collaborators.
    """

    def __init__(
        self,
        validator: PersonalCodeValidator | None = None,
        constants: DecisionEngineConstants = DEFAULT_CONSTANTS,
    ):
        self.validator = validator or PersonalCodeValidator()
        self.constants = constants

    def calculate_approved_loan(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
        country: Optional[str],
        today: date | None = None,
    ) -> Decision:
        """
        Main entry point: validate the request and find the best loan offer.

        Flow:
        1. Verify inputs (invalid input becomes a Decision with an error message)
        2. Check the applicant's age against the country's limits
        3. Derive the credit modifier from the personal code
        4. Find the shortest period >= the requested one reaching the minimum amount

        The approved amount is the largest amount serviceable over that period,
        capped at the maximum loan amount, regardless of the amount requested.

        Raises:
            AgeRestrictionError: Applicant is too young or too old
            NoValidLoanError: Debtor segment, or no period within bounds works
        """
        try:
            self.verify_inputs(personal_code, loan_amount, loan_period, country)
        except InputValidationError as e:
            return Decision.rejected(str(e))

        self.check_age(personal_code, country, today=today)

        credit_modifier = get_credit_modifier(personal_code, self.constants)
        approved_period = self.find_loan_period(credit_modifier, loan_period)
        approved_amount = min(
            self.constants.max_loan_amount,
            highest_valid_loan_amount(credit_modifier, approved_period),
        )

        return Decision.approved(approved_amount, approved_period)

    def verify_inputs(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
        country: Optional[str],
    ) -> None:
        """
        Verify all inputs against business rules, in a fixed order.

        Raises:
            InvalidPersonalCodeError: Personal code fails validation
            InvalidLoanAmountError: Amount outside [min, max] loan amount
            InvalidLoanPeriodError: Period outside [min, max] loan period
            InvalidCountryError: Country missing or not served
        """
        c = self.constants

        if not self.validator.is_valid(personal_code):
            raise InvalidPersonalCodeError("Invalid personal ID code!")
        if not c.min_loan_amount <= loan_amount <= c.max_loan_amount:
            raise InvalidLoanAmountError("Invalid loan amount!")
        if not c.min_loan_period <= loan_period <= c.max_loan_period:
            raise InvalidLoanPeriodError("Invalid loan period!")
        if country is None or country not in c.supported_countries:
            raise InvalidCountryError("We dont offer loans in your country yet!")

    def check_age(self, personal_code: str, country: Optional[str], today: date | None = None) -> None:
        """
        Check that the applicant is old enough and will outlive the longest loan term.

        Boundary ages are eligible. The upper limit uses the configured maximum
        period, so it is the same for every applicant in a country.

        Raises:
            AgeRestrictionError: Applicant is too old to be alive, too young or too old
            InvalidCountryError: Country has no configured life expectancy
        """
        if country is None or country not in self.constants.supported_countries:
            raise InvalidCountryError("We dont offer loans in your country yet!")

        age = get_age(personal_code, today=today)

        if age < self.constants.min_age:
            raise AgeRestrictionError("You are too young to take a loan!")
        if age > self.constants.max_age(country):
            raise AgeRestrictionError("You are too old to take a loan!")

    def find_loan_period(self, credit_modifier: int, requested_period: int) -> int:
        """
        Find the shortest period >= requested_period whose capacity reaches the minimum amount.

        At most max_loan_period - requested_period + 1 periods are tried.

        Raises:
            NoValidLoanError: Debtor (modifier 0) or no period up to the maximum qualifies
        """
        if credit_modifier == 0:
            raise NoValidLoanError("No valid loan found!")

        for period in range(requested_period, self.constants.max_loan_period + 1):
            if highest_valid_loan_amount(credit_modifier, period) >= self.constants.min_loan_amount:
                return period

        raise NoValidLoanError("No valid loan found!")
