"""Rule engine foundation with calculation context, value coercion, and base calculator."""

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from energiepilot.models.domain.rules import InputRecord, Program, RuleTable


class _Missing:
    """Marker for a field that is absent from the input record."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def read_field(record: Any, field: Optional[str]) -> Any:
    """
    Read a field from the input record.

    Returns MISSING when the record is not a mapping or the field is absent.
    An explicit None in the record is returned as None.
    """
    if field is None or not isinstance(record, Mapping):
        return MISSING
    return record.get(field, MISSING)


def _int_to_float(number: int) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")
_INFINITY_LITERALS = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}
_RADIX_LITERALS = {"x": (16, "0123456789abcdef"), "o": (8, "01234567"), "b": (2, "01")}


def _parse_number(text: str) -> float:
    if text in _INFINITY_LITERALS:
        return _INFINITY_LITERALS[text]
    if len(text) > 2 and text[0] == "0" and text[1].lower() in _RADIX_LITERALS:
        base, alphabet = _RADIX_LITERALS[text[1].lower()]
        digits = text[2:]
        if all(char in alphabet for char in digits.lower()):
            return _int_to_float(int(digits, base))
        return math.nan
    if _DECIMAL_LITERAL.match(text):
        return float(text)
    return math.nan


def to_number(value: Any) -> float:
    """
    Coerce a value to a number the way the rule table expects.

    MISSING gives NaN, None gives 0, booleans give 0/1, single-element lists
    use their element. Integers too large for a float give +/-inf.

    Strings are parsed as numeric literals: surrounding whitespace is
    ignored, blank gives 0, decimal literals with an optional exponent,
    unsigned 0x/0o/0b literals and the words Infinity/+Infinity/-Infinity
    are accepted. Anything else, including "inf", "nan" and digit
    separators, gives NaN.
    """
    if value is MISSING:
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        return _parse_number(text)
    if isinstance(value, (list, tuple)):
        if not value:
            return 0.0
        if len(value) == 1:
            element = value[0]
            if isinstance(element, bool):
                # "true"/"false" are not numbers
                return math.nan
            return to_number(element)
    return math.nan


def strict_equals(left: Any, right: Any) -> bool:
    """
    Equality without type coercion.

    Booleans never equal numbers, numbers compare by value, lists and
    objects never compare equal. MISSING only equals MISSING.
    """
    if left is MISSING or right is MISSING:
        return left is right
    if left is None or right is None:
        return left is right
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return False


def is_truthy(value: Any) -> bool:
    """
    Truthiness of an input flag.

    MISSING, None, False, 0, NaN and "" are falsy. Empty lists and objects
    count as set.
    """
    if value is MISSING or value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def pct(value: Optional[float]) -> float:
    """Percentage field of the rule table, 0 when unset."""
    return value or 0.0


@dataclass(frozen=True)
class CalculationContext:
    """
    Calculation context for computing a program's funding rate.

    Attributes:
        program: The program being calculated
        input: The caller's input record
        rule_table: The rule table the program belongs to (global caps)
    """

    program: Program
    input: InputRecord
    rule_table: RuleTable

    def flag(self, field: str) -> bool:
        """Whether an input flag is set."""
        return is_truthy(read_field(self.input, field))


class RateCalculator(ABC):
    """
    Abstract base class for funding rate calculators using the Strategy pattern.

    Each concrete calculator implements the rate algorithm for one funding
    variant (loan with repayment bonus, direct subsidy).
    """

    @abstractmethod
    def calculate(self, context: CalculationContext) -> Optional[float]:
        """
        Calculate the funding rate in percent.

        Args:
            context: CalculationContext with program, input and rule table

        Returns:
            Funding rate in percent, or None if the program has no percentage rate
        """
        pass

    @staticmethod
    def _clamp(value: float, cap: Optional[float]) -> float:
        """Clamp a value down to the cap. A falsy cap leaves the value unchanged."""
        if cap:
            return min(value, cap)
        return value
