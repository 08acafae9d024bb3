"""Shared fixtures for rule engine and API tests."""

import pytest

from energiepilot.models.domain.rules import Program, RuleTable
from energiepilot.services.rule_loader import parse_rule_table


def make_program(key, **overrides):
    """Build a program from a minimal definition."""
    data = {"key": key, "agency": "KfW", "program_no": key, "label": key}
    data.update(overrides)
    return Program.model_validate(data)


@pytest.fixture
def rule_data():
    """Small rule document covering both funding types and a plain loan."""
    return {
        "globals": {"bafa_em": {"zuschuss_max_total_pct": 70}},
        "programs": [
            {
                "key": "KFW_261",
                "agency": "KfW",
                "program_no": "261",
                "label": "Wohngebäude Kredit",
                "measure": ["Sanierung_EH"],
                "eligibility_if": [{"field": "building_age_years", "gte": 5}],
                "funding": {
                    "type": "kredit_tilgungszuschuss",
                    "base_rate_pct_by_eh": {"55": 15, "40": 20},
                    "ee_class_bonus_pct": 5,
                    "optional_boni": {"WPB": 10, "SerSan": 15, "boni_cap_pct": 20},
                    "max_amount_eur_per_we": 150000,
                },
                "calculation": {"notes": ["Tilgungszuschuss in % des Kredits."]},
            },
            {
                "key": "KFW_458",
                "agency": "KfW",
                "program_no": "458",
                "label": "Heizungsförderung",
                "measure": ["Heizungstausch_Biomasse"],
                "eligibility_if": [{"field": "building_age_years", "gte": 5}],
                "funding": {
                    "type": "zuschuss",
                    "base_rate_pct": 30,
                    "bonuses": [
                        {
                            "if_all": [{"field": "household_income_eur", "le": 40000}],
                            "add_pct": 30,
                        },
                        {
                            "if_all": [{"field": "owner_occupied", "eq": True}],
                            "add_pct": 20,
                        },
                    ],
                    "max_amount_eur": 21000,
                },
            },
            {
                "key": "BAFA_EM_WAERMEPUMPE",
                "agency": "BAFA",
                "program_no": "BEG EM",
                "label": "Wärmepumpe",
                "measure": ["Heizungstausch_WP"],
                "funding": {"type": "zuschuss", "base_rate_pct": 25},
            },
            {
                "key": "BAFA_EM_HUELLE",
                "agency": "BAFA",
                "program_no": "BEG EM",
                "label": "Gebäudehülle",
                "measure": ["Gebaeudehuelle"],
                "funding": {
                    "type": "zuschuss",
                    "base_rate_pct": 15,
                    "isfp_bonus_pct": 5,
                    "max_amount_eur_range": [30000, 60000],
                },
            },
            {
                "key": "KFW_358",
                "agency": "KfW",
                "program_no": "358",
                "label": "Ergänzungskredit",
                "measure": ["Gebaeudehuelle", "Heizungstausch_WP"],
                "eligibility_if": [{"field": "owner_occupied", "eq": True}],
                "funding": {"type": "kredit", "max_amount_eur": 120000},
            },
        ],
    }


@pytest.fixture
def rule_table(rule_data) -> RuleTable:
    return parse_rule_table(rule_data)
