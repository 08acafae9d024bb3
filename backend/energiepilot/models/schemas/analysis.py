"""Pydantic schemas for subsidy analysis responses."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field


# ==================== Program Result Schemas ====================


class ProgramResult(BaseModel):
    """Computed result for one eligible program."""

    key: str
    agency: Optional[str] = None
    program_no: Optional[Union[str, int]] = None
    label: Optional[str] = None
    measure: list[str] = Field(default_factory=list)
    funding_type: Optional[str] = None
    rate_pct: Optional[float] = Field(
        None, description="Funding rate in percent, null for programs without a percentage rate"
    )
    max_amount: Any = Field(
        None, description="Maximum amount in EUR, per housing unit, or a range"
    )
    notes: list[str] = Field(default_factory=list)


# ==================== Analysis Schemas ====================


class AnalysisResponse(BaseModel):
    """Complete analysis response."""

    ok: bool = True
    input: dict[str, Any] = Field(default_factory=dict)
    eligible_before_filter: list[str] = Field(default_factory=list)
    eligible_after_filter: list[str] = Field(default_factory=list)
    results: list[ProgramResult] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error envelope for unexpected server faults."""

    ok: bool = False
    errorType: str
    errorMessage: str
    trace: list[str] = Field(default_factory=list)
