"""Rate calculators for the different funding types."""

from .loan_calculator import LoanRateCalculator
from .subsidy_calculator import SubsidyRateCalculator

__all__ = [
    "LoanRateCalculator",
    "SubsidyRateCalculator",
]
