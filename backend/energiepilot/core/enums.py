"""Core enums for type safety across the application."""

from enum import Enum


class FundingType(str, Enum):
    """Funding type tags used in the rule table."""

    KREDIT_TILGUNGSZUSCHUSS = "kredit_tilgungszuschuss"
    ZUSCHUSS = "zuschuss"


class Measure(str, Enum):
    """Renovation measures with special handling in the measure filter."""

    HEIZUNGSTAUSCH_WP = "Heizungstausch_WP"


class ProgramKey(str, Enum):
    """Program keys referenced directly by filter logic."""

    KFW_458 = "KFW_458"
    BAFA_EM_WAERMEPUMPE = "BAFA_EM_WAERMEPUMPE"


class ConditionOperator(str, Enum):
    """Comparison operators of an eligibility condition, in evaluation order."""

    EQ = "eq"
    LTE = "lte"
    LE = "le"
    GTE = "gte"
    GE = "ge"
    IN = "in"
