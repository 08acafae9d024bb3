"""Service layer for business logic."""

from energiepilot.services.analysis_service import AnalysisService
from energiepilot.services.rule_loader import load_rule_table, parse_rule_table

__all__ = ["AnalysisService", "load_rule_table", "parse_rule_table"]
