"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from energiepilot.deps import get_rule_table
from energiepilot.models.domain.rules import RuleTable

router = APIRouter()


@router.get("/health")
async def health_check(rule_table: Annotated[RuleTable, Depends(get_rule_table)]) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running and the rule table is loaded.

    Returns:
        dict: Health status with API and rule table status
    """
    programs = len(rule_table.programs)

    return {
        "status": "healthy" if programs else "degraded",
        "api": "healthy",
        "rule_table": {"programs": programs},
    }
