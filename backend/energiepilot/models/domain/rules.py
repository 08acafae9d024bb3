"""Rule table domain models for the subsidy matching engine.

The rule table is parsed once at startup and never mutated afterwards, so
every model here is frozen. Unknown keys in the rule file are ignored.
"""

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

from energiepilot.core.enums import FundingType

# Parsed JSON request body. No schema is enforced on it.
InputRecord = Mapping[str, Any]


class RuleModel(BaseModel):
    """Base for all rule table models."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_defaults(cls, data: Any) -> Any:
        """Treat an explicit null like a missing key for list and submodel fields."""
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, info in cls.model_fields.items():
            if info.default_factory is not None:
                defaulted.add(name)
                if info.alias:
                    defaulted.add(info.alias)
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in defaulted)
        }


class Condition(RuleModel):
    """
    Atomic eligibility predicate.

    Operator presence is taken from ``model_fields_set`` so that an explicit
    ``null`` in the rule file still counts as a present operator.

    Attributes:
        field: Input record field to read
        eq: Strict equality operand
        gte: Lower bound (numeric), alias ``ge``
        lte: Upper bound (numeric), alias ``le``
        in_: Allowed values, serialized as ``in``
    """

    field: Optional[str] = None
    eq: Any = None
    gte: Any = None
    ge: Any = None
    lte: Any = None
    le: Any = None
    in_: Any = Field(default=None, alias="in")

    def has_operator(self, name: str) -> bool:
        """Check whether the operator key was present in the rule data."""
        attribute = "in_" if name == "in" else name
        return attribute in self.model_fields_set


class BonusRule(RuleModel):
    """Additive bonus applied when all of its conditions pass."""

    if_all: tuple[Condition, ...] = Field(default_factory=tuple)
    add_pct: Optional[float] = None
    add_pct_max: Optional[float] = None


class OptionalBoni(RuleModel):
    """Optional repayment bonuses of a loan program."""

    WPB: Optional[float] = None
    SerSan: Optional[float] = None
    boni_cap_pct: Optional[float] = None


class FundingBase(RuleModel):
    """Fields shared by every funding variant."""

    max_amount_eur: Optional[Union[int, float]] = None
    max_amount_eur_per_we: Optional[Union[int, float]] = None
    max_amount_eur_range: Any = None

    @property
    def max_amount(self) -> Any:
        """First defined maximum amount, or None."""
        for value in (
            self.max_amount_eur,
            self.max_amount_eur_per_we,
            self.max_amount_eur_range,
        ):
            if value is not None:
                return value
        return None


class LoanFunding(FundingBase):
    """Loan with repayment bonus (Tilgungszuschuss)."""

    type: Literal["kredit_tilgungszuschuss"] = "kredit_tilgungszuschuss"
    base_rate_pct_by_eh: dict[str, Optional[float]] = Field(default_factory=dict)
    ee_class_bonus_pct: Optional[float] = None
    optional_boni: Optional[OptionalBoni] = None


class SubsidyFunding(FundingBase):
    """Direct percentage subsidy (Zuschuss)."""

    type: Literal["zuschuss"] = "zuschuss"
    base_rate_pct: Optional[float] = None
    isfp_bonus_pct: Optional[float] = None
    bonuses: tuple[BonusRule, ...] = Field(default_factory=tuple)


class OtherFunding(FundingBase):
    """Funding without a percentage subsidy, e.g. plain loans."""

    type: Optional[str] = None


def _funding_tag(value: Any) -> str:
    """Resolve the union tag for a raw or already parsed funding definition."""
    if isinstance(value, dict):
        raw_type = value.get("type")
    else:
        raw_type = getattr(value, "type", None)

    if raw_type == FundingType.KREDIT_TILGUNGSZUSCHUSS.value:
        return FundingType.KREDIT_TILGUNGSZUSCHUSS.value
    if raw_type == FundingType.ZUSCHUSS.value:
        return FundingType.ZUSCHUSS.value
    return "other"


FundingDefinition = Annotated[
    Union[
        Annotated[LoanFunding, Tag(FundingType.KREDIT_TILGUNGSZUSCHUSS.value)],
        Annotated[SubsidyFunding, Tag(FundingType.ZUSCHUSS.value)],
        Annotated[OtherFunding, Tag("other")],
    ],
    Discriminator(_funding_tag),
]


class ProgramCaps(RuleModel):
    """Program-level caps."""

    zuschuss_total_cap_pct: Optional[float] = None


class CalculationSpec(RuleModel):
    """Calculation hints shown alongside a program result."""

    notes: tuple[str, ...] = Field(default_factory=tuple)
    total_bonus_cap_pct: Optional[float] = None


class Program(RuleModel):
    """
    Funding program as defined in the rule table.

    Attributes:
        key: Unique program identifier, e.g. "KFW_261"
        agency: Funding agency (KfW, BAFA)
        program_no: Official program number
        label: Display name
        measure: Renovation measures the program covers
        eligibility_if: Conditions that must all pass
        funding: Funding definition, one of the funding variants
        caps: Program-level caps
        calculation: Notes and calculation caps
    """

    key: str
    agency: Optional[str] = None
    program_no: Optional[Union[str, int]] = None
    label: Optional[str] = None
    measure: tuple[str, ...] = Field(default_factory=tuple)
    eligibility_if: tuple[Condition, ...] = Field(default_factory=tuple)
    funding: FundingDefinition = Field(default_factory=OtherFunding)
    caps: ProgramCaps = Field(default_factory=ProgramCaps)
    calculation: CalculationSpec = Field(default_factory=CalculationSpec)


class BafaEmGlobals(RuleModel):
    """Global settings for BAFA single measures (BEG EM)."""

    zuschuss_max_total_pct: Optional[float] = None


class RuleGlobals(RuleModel):
    """Global settings shared by all programs."""

    bafa_em: BafaEmGlobals = Field(default_factory=BafaEmGlobals)


class RuleTable(RuleModel):
    """Complete rule table: programs plus global caps."""

    programs: tuple[Program, ...] = Field(default_factory=tuple)
    globals_: RuleGlobals = Field(default_factory=RuleGlobals, alias="globals")

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "RuleTable":
        seen: set[str] = set()
        for program in self.programs:
            if program.key in seen:
                raise ValueError(f"Duplicate program key '{program.key}' in rule table")
            seen.add(program.key)
        return self

    @property
    def global_zuschuss_cap_pct(self) -> Optional[float]:
        return self.globals_.bafa_em.zuschuss_max_total_pct

    def get_program(self, key: str) -> Optional[Program]:
        for program in self.programs:
            if program.key == key:
                return program
        return None
