"""
Test the safety validator checks, aggregation and display tiers.
"""

import pytest

from youthmatch.safety import validate, validate_all, safety_status, hide_flagged
from youthmatch.logic import SafetyStatus


def _passed(check) -> int:
    return sum(1 for passed in check.checks.model_dump().values() if passed)


def test_well_formed_program_passes_everything(make_program):
    check = validate(make_program())

    assert check.program_id == "p1"
    assert check.overall_score == pytest.approx(1.0)
    assert check.flagged is False
    assert check.review_notes is None
    assert check.status == SafetyStatus.VERIFIED.value


def test_inappropriate_title_fails_content_check(make_program):
    check = validate(make_program(title="Drinking club night"))

    assert check.checks.no_inappropriate_content is False
    assert check.overall_score == pytest.approx(5 / 6)


def test_inappropriate_bare_listing_is_flagged(make_program):
    program = make_program(
        title="Drinking club night",
        description="Late event downtown",
        verified=False,
        location={"name": "Warehouse 9"},
        requirements=[],
    )
    check = validate(program)

    assert check.flagged is True
    assert check.review_notes == "Program requires manual review"
    assert check.overall_score < 0.6


def test_content_check_reads_description(make_program):
    check = validate(make_program(description="Fully unsupervised afternoon."))
    assert check.checks.no_inappropriate_content is False


def test_wide_age_span_flags_even_with_high_score(make_program):
    check = validate(make_program(age_range={"min": 5, "max": 18}))

    assert check.checks.age_appropriate is False
    assert check.overall_score == pytest.approx(5 / 6)
    assert check.flagged is True
    assert check.status == SafetyStatus.NEEDS_REVIEW.value


@pytest.mark.parametrize("age_range,expected", [
    ({"min": 8, "max": 18}, True),
    ({"min": 15, "max": 26}, False),
    ({"min": 13, "max": 24}, False),
])
def test_age_range_sanity(make_program, age_range, expected):
    assert validate(make_program(age_range=age_range)).checks.age_appropriate is expected


def test_missing_contact_fails_verified_organization(make_program):
    program = make_program(contact={"email": None, "phone": None, "website": "https://example.org"})
    check = validate(program)

    assert check.checks.verified_organization is False


def test_blank_organization_fails_verified_organization(make_program):
    assert validate(make_program(organization="  ")).checks.verified_organization is False


def test_safe_location_is_case_insensitive(make_program):
    assert validate(make_program(location={"name": "LINCOLN PARK Field House"})).checks.safe_location is True
    assert validate(make_program(location={"name": "Warehouse 9"})).checks.safe_location is False


def test_capacity_heuristics(make_program):
    check = validate(make_program(capacity={"current": 40, "max": 60}))

    assert check.checks.background_checked_staff is True
    assert check.checks.appropriate_supervision is False


def test_supervision_needs_scheduled_days(make_program):
    check = validate(make_program(schedule={"days": []}))
    assert check.checks.appropriate_supervision is False


def test_overall_score_is_passed_fraction(make_program):
    programs = [
        make_program(id="a"),
        make_program(id="b", verified=False, requirements=[]),
        make_program(id="c", title="Mature audiences", capacity={"current": 0, "max": 150}),
    ]
    for check in validate_all(programs):
        assert check.overall_score == pytest.approx(_passed(check) / 6)
        assert check.flagged == (check.overall_score < 0.6 or not check.checks.age_appropriate)


def test_middle_scores_show_concerns(make_program):
    # Fails location and supervision only: 4/6
    program = make_program(location={"name": "Warehouse 9"}, capacity={"current": 5, "max": 60})
    check = validate(program)

    assert check.flagged is False
    assert check.overall_score == pytest.approx(4 / 6)
    assert safety_status(check) == SafetyStatus.CONCERNS


def test_validate_is_idempotent(make_program):
    program = make_program(title="Park cleanup")
    assert validate(program) == validate(program)


def test_hide_flagged(make_program):
    programs = [
        make_program(id="ok"),
        make_program(id="wide", age_range={"min": 2, "max": 20}),
    ]
    assert [p.id for p in hide_flagged(programs)] == ["ok"]
