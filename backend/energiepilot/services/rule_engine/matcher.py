"""Two-stage program matching: eligibility conditions, then measure filter."""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from energiepilot.core.enums import Measure, ProgramKey
from energiepilot.models.domain.rules import InputRecord, Program, RuleTable
from energiepilot.services.rule_engine.base import is_truthy, read_field
from energiepilot.services.rule_engine.conditions import passes_all

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchOutcome:
    """
    Result of matching an input record against the rule table.

    Attributes:
        eligible_before_filter: Programs passing all eligibility conditions
        eligible_after_filter: Programs remaining after the measure filter
        failsafe_applied: Whether the measure filter emptied the list and
            the pre-filter list was used instead
    """

    eligible_before_filter: List[Program]
    eligible_after_filter: List[Program]
    failsafe_applied: bool = False


def filter_eligible(programs: Sequence[Program], input: InputRecord) -> List[Program]:
    """
    Keep programs whose eligibility conditions all pass.

    Order is preserved. A program without conditions is always eligible.
    """
    return [
        program for program in programs if passes_all(program.eligibility_if, input)
    ]


def filter_by_measure(programs: Sequence[Program], input: InputRecord) -> List[Program]:
    """
    Narrow programs down to the selected renovation measure.

    Without a selected measure the list is returned unchanged. For a heat
    pump replacement where KfW 458 is a candidate, the BAFA heat pump
    subsidy is dropped: the two programs are mutually exclusive, and
    KfW 458 is kept regardless of its measure list.
    """
    selected = read_field(input, "measure_selected")
    if not is_truthy(selected):
        return list(programs)

    keys = {program.key for program in programs}
    if (
        selected == Measure.HEIZUNGSTAUSCH_WP.value
        and ProgramKey.KFW_458.value in keys
    ):
        return [
            program
            for program in programs
            if program.key != ProgramKey.BAFA_EM_WAERMEPUMPE.value
            and (
                selected in program.measure
                or program.key == ProgramKey.KFW_458.value
            )
        ]

    return [program for program in programs if selected in program.measure]


class Matcher:
    """
    Two-stage matching of an input record against the rule table.

    Stage 1: Eligibility
        - Every condition in program.eligibility_if must pass

    Stage 2: Measure filter
        - Keep programs covering input.measure_selected
        - Heat pump special case (KfW 458 excludes BAFA heat pump subsidy)
        - Failsafe: an empty result falls back to the stage 1 list
    """

    def __init__(self, rule_table: RuleTable):
        """
        Initialize the matcher.

        Args:
            rule_table: The rule table to match against
        """
        self.rule_table = rule_table

    def match(self, input: InputRecord) -> MatchOutcome:
        """
        Match an input record against all programs.

        Args:
            input: The caller's input record

        Returns:
            MatchOutcome with the program lists before and after the measure filter
        """
        eligible = filter_eligible(self.rule_table.programs, input)
        filtered = filter_by_measure(eligible, input)

        if not filtered and eligible:
            logger.info(
                f"Measure filter for {read_field(input, 'measure_selected')!r} "
                f"left no programs, falling back to {len(eligible)} eligible programs"
            )
            return MatchOutcome(
                eligible_before_filter=eligible,
                eligible_after_filter=list(eligible),
                failsafe_applied=True,
            )

        return MatchOutcome(
            eligible_before_filter=eligible,
            eligible_after_filter=filtered,
        )
