"""Rate calculator for direct subsidies (BAFA single measures, KfW 458)."""

from typing import Optional

from energiepilot.models.domain.rules import SubsidyFunding
from energiepilot.services.rule_engine.base import (
    CalculationContext,
    RateCalculator,
    pct,
)
from energiepilot.services.rule_engine.conditions import passes_all


class SubsidyRateCalculator(RateCalculator):
    """
    Calculator for ``zuschuss`` funding.

    The rate is base_rate_pct plus the iSFP bonus (if has_isfp) plus every
    bonus rule whose conditions all pass. The total is capped afterwards by
    caps.zuschuss_total_cap_pct, falling back to the global BAFA EM cap.
    """

    def calculate(self, context: CalculationContext) -> Optional[float]:
        funding = context.program.funding
        if not isinstance(funding, SubsidyFunding):
            raise ValueError(
                f"SubsidyRateCalculator cannot handle funding type: {funding.type}"
            )

        rate = pct(funding.base_rate_pct)

        if context.flag("has_isfp") and funding.isfp_bonus_pct:
            rate += funding.isfp_bonus_pct

        for bonus in funding.bonuses:
            if not passes_all(bonus.if_all, context.input):
                continue
            # add_pct and add_pct_max stack when both are set
            if bonus.add_pct:
                rate += bonus.add_pct
            if bonus.add_pct_max:
                rate += bonus.add_pct_max

        return self._clamp(rate, self._resolve_cap(context))

    @staticmethod
    def _resolve_cap(context: CalculationContext) -> Optional[float]:
        program_cap = context.program.caps.zuschuss_total_cap_pct
        if program_cap is not None:
            return program_cap
        return context.rule_table.global_zuschuss_cap_pct
