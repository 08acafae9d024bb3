"""Analysis service for orchestrating eligibility matching and rate calculation."""

import logging

from energiepilot.models.domain.rules import InputRecord, RuleTable
from energiepilot.models.schemas.analysis import AnalysisResponse
from energiepilot.services.rule_engine.engine import RateEngine
from energiepilot.services.rule_engine.matcher import Matcher
from energiepilot.services.rule_engine.projection import project

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Analysis service to orchestrate a single subsidy analysis.

    This service:
    - Matches the input record against the rule table (eligibility, measure filter)
    - Computes the funding rate of every remaining program
    - Projects each program into a result record

    The service holds no state besides the rule table, so one instance can
    serve any number of requests.
    """

    def __init__(self, rule_table: RuleTable):
        """
        Initialize the analysis service.

        Args:
            rule_table: The immutable rule table loaded at startup
        """
        self.rule_table = rule_table
        self.matcher = Matcher(rule_table)
        self.rate_engine = RateEngine(rule_table)

    def analyse(self, input: InputRecord) -> AnalysisResponse:
        """
        Run the analysis for one input record.

        Args:
            input: The caller's input record (parsed request body)

        Returns:
            AnalysisResponse with program keys before and after the measure
            filter and one result per remaining program
        """
        outcome = self.matcher.match(input)

        results = [
            project(program, self.rate_engine.compute_rate(program, input))
            for program in outcome.eligible_after_filter
        ]

        logger.info(
            f"Analysis finished: {len(outcome.eligible_before_filter)} eligible, "
            f"{len(outcome.eligible_after_filter)} after measure filter"
        )

        return AnalysisResponse(
            ok=True,
            input=dict(input),
            eligible_before_filter=[p.key for p in outcome.eligible_before_filter],
            eligible_after_filter=[p.key for p in outcome.eligible_after_filter],
            results=results,
        )
