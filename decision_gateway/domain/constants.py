"""Fixed loan configuration for the decision engine"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from decision_gateway.domain.models import CreditSegment


def _frozen(values: dict) -> Mapping:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class DecisionEngineConstants:
    """Loan bounds, segment credit modifiers and per-country life expectancy"""

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60
    min_age: int = 18
    credit_modifiers: Mapping[CreditSegment, int] = field(
        default_factory=lambda: _frozen(
            {
                CreditSegment.SEGMENT_1: 100,
                CreditSegment.SEGMENT_2: 300,
                CreditSegment.SEGMENT_3: 1000,
            }
        )
    )
    life_expectancy: Mapping[str, int] = field(
        default_factory=lambda: _frozen(
            {
                "Estonia": 78,
                "Latvia": 90,
                "Lithuania": 76,
            }
        )
    )

    def __post_init__(self):
        # Callers may pass plain dicts; store read-only copies
        object.__setattr__(self, "credit_modifiers", _frozen(self.credit_modifiers))
        object.__setattr__(self, "life_expectancy", _frozen(self.life_expectancy))

    @property
    def supported_countries(self) -> frozenset[str]:
        return frozenset(self.life_expectancy)

    def max_age(self, country: str) -> int:
        """Oldest eligible age: the applicant must outlive the longest loan term"""
        return self.life_expectancy[country] - self.max_loan_period // 12


DEFAULT_CONSTANTS = DecisionEngineConstants()
