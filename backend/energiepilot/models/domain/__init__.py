"""Domain models for the application."""

from energiepilot.models.domain.rules import (
    BonusRule,
    CalculationSpec,
    Condition,
    FundingDefinition,
    InputRecord,
    LoanFunding,
    OptionalBoni,
    OtherFunding,
    Program,
    ProgramCaps,
    RuleTable,
    SubsidyFunding,
)

__all__ = [
    "InputRecord",
    "Condition",
    "BonusRule",
    "OptionalBoni",
    "LoanFunding",
    "SubsidyFunding",
    "OtherFunding",
    "FundingDefinition",
    "ProgramCaps",
    "CalculationSpec",
    "Program",
    "RuleTable",
]
