"""Rate engine for dispatching programs to their funding rate calculator."""

from typing import Dict, Optional, Type

from energiepilot.models.domain.rules import (
    FundingBase,
    InputRecord,
    LoanFunding,
    Program,
    RuleTable,
    SubsidyFunding,
)
from energiepilot.services.rule_engine.base import CalculationContext, RateCalculator
from energiepilot.services.rule_engine.calculators import (
    LoanRateCalculator,
    SubsidyRateCalculator,
)


class RateEngine:
    """
    Rate engine for computing a program's funding rate.

    This class:
    - Maintains a registry of rate calculators keyed by funding variant
    - Builds the calculation context for a program
    - Returns None for funding variants without a calculator (plain loans)
    """

    def __init__(self, rule_table: RuleTable):
        """
        Initialize the rate engine with calculator registry.

        Args:
            rule_table: The rule table providing global caps
        """
        self.rule_table = rule_table
        self._calculators: Dict[Type[FundingBase], RateCalculator] = {}
        self._register_default_calculators()

    def _register_default_calculators(self):
        """Register default calculators for the known funding variants."""
        self._calculators[LoanFunding] = LoanRateCalculator()
        self._calculators[SubsidyFunding] = SubsidyRateCalculator()

    def register_calculator(
        self, funding_class: Type[FundingBase], calculator: RateCalculator
    ) -> None:
        """
        Register a custom calculator for a funding variant.

        Args:
            funding_class: The funding model class to handle
            calculator: The calculator instance
        """
        self._calculators[funding_class] = calculator

    def compute_rate(self, program: Program, input: InputRecord) -> Optional[float]:
        """
        Compute the funding rate for a program.

        Args:
            program: The program to calculate
            input: The caller's input record

        Returns:
            Funding rate in percent, or None if the program has no percentage rate
        """
        calculator = self._calculators.get(type(program.funding))
        if calculator is None:
            return None

        context = CalculationContext(
            program=program,
            input=input,
            rule_table=self.rule_table,
        )
        return calculator.calculate(context)


def compute_rate(
    program: Program, input: InputRecord, rule_table: RuleTable
) -> Optional[float]:
    """Compute a program's funding rate with the default calculators."""
    return RateEngine(rule_table).compute_rate(program, input)
