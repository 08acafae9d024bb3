"""Projection of eligible programs into result records."""

from typing import Optional

from energiepilot.models.domain.rules import Program
from energiepilot.models.schemas.analysis import ProgramResult


def project(program: Program, rate: Optional[float]) -> ProgramResult:
    """
    Build the result record for an eligible program.

    Args:
        program: The eligible program
        rate: Computed funding rate, or None for non-percentage programs

    Returns:
        ProgramResult with identifiers, rate, maximum amount and notes
    """
    funding = program.funding
    return ProgramResult(
        key=program.key,
        agency=program.agency,
        program_no=program.program_no,
        label=program.label,
        measure=list(program.measure),
        funding_type=funding.type or None,
        rate_pct=rate,
        max_amount=funding.max_amount,
        notes=list(program.calculation.notes),
    )
