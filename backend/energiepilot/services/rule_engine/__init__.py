"""Rule engine for matching renovation projects against subsidy programs."""

from .base import MISSING, CalculationContext, RateCalculator
from .conditions import passes, passes_all
from .engine import RateEngine, compute_rate
from .matcher import MatchOutcome, Matcher, filter_by_measure, filter_eligible
from .projection import project

__all__ = [
    "MISSING",
    "CalculationContext",
    "MatchOutcome",
    "Matcher",
    "RateCalculator",
    "RateEngine",
    "compute_rate",
    "filter_by_measure",
    "filter_eligible",
    "passes",
    "passes_all",
    "project",
]
