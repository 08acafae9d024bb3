"""Rate calculator for loans with repayment bonus (e.g. KfW 261).

The rate is the repayment bonus in percent of the loan principal:

    base rate for the target efficiency class
    + EE class bonus (if requested)
    + optional boni (WPB, SerSan), capped as a group
"""

from typing import Any, Optional

from energiepilot.models.domain.rules import LoanFunding
from energiepilot.services.rule_engine.base import (
    CalculationContext,
    RateCalculator,
    is_truthy,
    pct,
    read_field,
)


class LoanRateCalculator(RateCalculator):
    """
    Calculator for ``kredit_tilgungszuschuss`` funding.

    Input flags:
    - target_eh_class: efficiency house class used for the base rate lookup
    - use_ee_class: adds ee_class_bonus_pct
    - has_wpb_bonus: adds optional_boni.WPB (worst performing building)
    - has_sersan_bonus: adds optional_boni.SerSan (serial renovation)
    """

    def calculate(self, context: CalculationContext) -> Optional[float]:
        funding = context.program.funding
        if not isinstance(funding, LoanFunding):
            raise ValueError(
                f"LoanRateCalculator cannot handle funding type: {funding.type}"
            )

        rate = self._base_rate(funding, read_field(context.input, "target_eh_class"))

        if context.flag("use_ee_class") and funding.ee_class_bonus_pct:
            rate += funding.ee_class_bonus_pct

        rate += self._optional_boni(context, funding)
        return rate

    @staticmethod
    def _base_rate(funding: LoanFunding, target_class: Any) -> float:
        """Look up the base rate for the target class, 0 if unmapped."""
        if not is_truthy(target_class):
            return 0.0
        return pct(funding.base_rate_pct_by_eh.get(_class_key(target_class)))

    def _optional_boni(self, context: CalculationContext, funding: LoanFunding) -> float:
        """
        Sum the optional boni and clamp the subtotal.

        Cap resolution: optional_boni.boni_cap_pct, then
        calculation.total_bonus_cap_pct, otherwise uncapped.
        """
        boni = funding.optional_boni
        if boni is None:
            return 0.0

        subtotal = 0.0
        if context.flag("has_wpb_bonus") and boni.WPB:
            subtotal += boni.WPB
        if context.flag("has_sersan_bonus") and boni.SerSan:
            subtotal += boni.SerSan

        cap = boni.boni_cap_pct or context.program.calculation.total_bonus_cap_pct
        return self._clamp(subtotal, cap)


def _class_key(value: Any) -> str:
    """Mapping key for an efficiency class given as string or number (55 -> "55")."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
