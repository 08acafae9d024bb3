"""
Tests for projecting programs into result records.
"""
from conftest import make_program

from energiepilot.services.rule_engine.projection import project


def test_project_copies_identifiers_and_notes():
    program = make_program(
        "KFW_261",
        agency="KfW",
        program_no="261",
        label="Wohngebäude Kredit",
        measure=["Sanierung_EH"],
        funding={"type": "kredit_tilgungszuschuss", "max_amount_eur_per_we": 150000},
        calculation={"notes": ["Hinweis 1", "Hinweis 2"]},
    )

    result = project(program, 25.0)

    assert result.key == "KFW_261"
    assert result.agency == "KfW"
    assert result.program_no == "261"
    assert result.label == "Wohngebäude Kredit"
    assert result.measure == ["Sanierung_EH"]
    assert result.funding_type == "kredit_tilgungszuschuss"
    assert result.rate_pct == 25.0
    assert result.max_amount == 150000
    assert result.notes == ["Hinweis 1", "Hinweis 2"]


def test_project_first_defined_max_amount_wins():
    program = make_program(
        "X",
        funding={
            "type": "zuschuss",
            "max_amount_eur": 21000,
            "max_amount_eur_range": [30000, 60000],
        },
    )

    assert project(program, 30.0).max_amount == 21000


def test_project_max_amount_range():
    program = make_program(
        "X", funding={"type": "zuschuss", "max_amount_eur_range": [30000, 60000]}
    )

    assert project(program, 15.0).max_amount == [30000, 60000]


def test_project_without_funding_details():
    result = project(make_program("X"), None)

    assert result.funding_type is None
    assert result.rate_pct is None
    assert result.max_amount is None
    assert result.notes == []


def test_project_keeps_integer_max_amounts():
    subsidy = make_program("X", funding={"type": "zuschuss", "max_amount_eur": 21000})
    loan = make_program(
        "Y", funding={"type": "kredit_tilgungszuschuss", "max_amount_eur_per_we": 150000}
    )

    assert isinstance(project(subsidy, 30.0).max_amount, int)
    assert isinstance(project(loan, 20.0).max_amount, int)
    assert '"max_amount":21000,' in project(subsidy, 30.0).model_dump_json()


def test_project_keeps_fractional_max_amounts():
    program = make_program("X", funding={"type": "zuschuss", "max_amount_eur": 2500.5})

    assert project(program, 30.0).max_amount == 2500.5
