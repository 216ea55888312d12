"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CreditSegment(Enum):
    """Credit segment keyed by the lower bound of its segmentation range"""

    DEBTOR = 0
    SEGMENT_1 = 2500
    SEGMENT_2 = 5000
    SEGMENT_3 = 7500

    @property
    def lower_bound(self) -> int:
        return self.value


@dataclass(frozen=True)
class Decision:
    """Output of a loan decision: an approved offer or an error message, never both"""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]

    def __post_init__(self):
        has_offer = self.loan_amount is not None and self.loan_period is not None
        has_partial_offer = (self.loan_amount is None) != (self.loan_period is None)
        has_error = self.error_message is not None

        if has_partial_offer or has_offer == has_error:
            raise ValueError(
                "Decision must carry either loan amount and period or an error message"
            )

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period, error_message=None)

    @classmethod
    def rejected(cls, error_message: str) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error_message=error_message)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None
