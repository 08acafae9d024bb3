"""Condition evaluator for eligibility and bonus predicates.

Operators are checked in a fixed order and the first one present decides:

    eq -> lte / le -> gte / ge -> in

A condition without any operator always passes. Malformed conditions never
raise; an ``in`` operand that is not a list simply does not match.
"""

import math
from typing import Any, Iterable

from energiepilot.core.enums import ConditionOperator
from energiepilot.models.domain.rules import Condition, InputRecord
from energiepilot.services.rule_engine.base import read_field, strict_equals, to_number

_ABSENT = object()


def passes(condition: Condition, record: InputRecord) -> bool:
    """
    Evaluate a single condition against the input record.

    Args:
        condition: The condition to evaluate
        record: The caller's input record

    Returns:
        True if the condition passes
    """
    value = read_field(record, condition.field)

    if condition.has_operator(ConditionOperator.EQ.value):
        return strict_equals(value, condition.eq)

    upper = _first_present(condition, ConditionOperator.LTE, ConditionOperator.LE)
    if upper is not _ABSENT:
        return to_number(value) <= to_number(upper)

    lower = _first_present(condition, ConditionOperator.GTE, ConditionOperator.GE)
    if lower is not _ABSENT:
        return to_number(value) >= to_number(lower)

    if condition.has_operator(ConditionOperator.IN.value):
        return _contains(condition.in_, value)

    return True


def passes_all(conditions: Iterable[Condition], record: InputRecord) -> bool:
    """Conjunction of all conditions. An empty list passes."""
    return all(passes(condition, record) for condition in conditions)


def _first_present(condition: Condition, *operators: ConditionOperator) -> Any:
    for operator in operators:
        if condition.has_operator(operator.value):
            return getattr(condition, operator.value)
    return _ABSENT


def _contains(candidates: Any, value: Any) -> bool:
    if not isinstance(candidates, list):
        return False
    for candidate in candidates:
        if strict_equals(candidate, value):
            return True
        # NaN matches NaN for membership
        if _is_nan(candidate) and _is_nan(value):
            return True
    return False


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
