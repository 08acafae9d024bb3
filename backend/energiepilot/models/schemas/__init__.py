"""Pydantic schemas for API validation and serialization."""

from energiepilot.models.schemas.analysis import (
    AnalysisResponse,
    ErrorResponse,
    ProgramResult,
)

__all__ = [
    "AnalysisResponse",
    "ErrorResponse",
    "ProgramResult",
]
