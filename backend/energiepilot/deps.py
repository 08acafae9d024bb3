"""Dependency injection for FastAPI endpoints."""

from fastapi import Request

from energiepilot.models.domain.rules import RuleTable
from energiepilot.services.analysis_service import AnalysisService

__all__ = ["get_rule_table", "get_analysis_service"]


def get_rule_table(request: Request) -> RuleTable:
    """
    Get the rule table loaded at application startup.

    The rule table lives on the application state and is shared read-only
    by all requests.
    """
    return request.app.state.rule_table


def get_analysis_service(request: Request) -> AnalysisService:
    """Get the analysis service bound to the application's rule table."""
    return request.app.state.analysis_service
