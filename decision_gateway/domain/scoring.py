"""Credit segmentation - maps a personal code to its credit modifier"""

from decision_gateway.domain.constants import DEFAULT_CONSTANTS, DecisionEngineConstants
from decision_gateway.domain.models import CreditSegment

# Highest lower bound first so the first match wins
_SEGMENTS_BY_LOWER_BOUND = sorted(CreditSegment, key=lambda s: s.lower_bound, reverse=True)


def get_credit_segment(personal_code: str) -> CreditSegment:
    """
    Map the last four digits of a personal code to a credit segment.

    Segments:
    - 0000 - 2499: Debtor (no loan)
    - 2500 - 4999: Segment 1
    - 5000 - 7499: Segment 2
    - 7500 - 9999: Segment 3
    """
    segment_number = int(personal_code[-4:])

    for segment in _SEGMENTS_BY_LOWER_BOUND:
        if segment_number >= segment.lower_bound:
            return segment

    raise ValueError(f"Segment number out of range: {segment_number}")


def get_credit_modifier(
    personal_code: str,
    constants: DecisionEngineConstants = DEFAULT_CONSTANTS,
) -> int:
    """Credit modifier for the code's segment; debtors get 0"""
    segment = get_credit_segment(personal_code)
    return constants.credit_modifiers.get(segment, 0)


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest loan the applicant can service over `loan_period` months"""
    return credit_modifier * loan_period
