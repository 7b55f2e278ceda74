"""
Safety Validator

Runs six independent rule checks over a program record and collapses them
into a compliance score. Checks only look at the program, never the user, and
a missing optional field fails its check rather than raising.
"""

import logging
from typing import Dict, List

from ..logic.contracts import Program, SafetyCheck, SafetyChecks
from ..logic.constants import SafetyStatus
from .rules import (
    CHECK_NAMES,
    SAFE_VENUES,
    INAPPROPRIATE_KEYWORDS,
    MAX_PROGRAM_AGE_SPAN,
    MIN_PROGRAM_AGE,
    MAX_PROGRAM_AGE,
    STAFFED_CAPACITY_LIMIT,
    SUPERVISED_CAPACITY_LIMIT,
    FLAG_THRESHOLD,
    VERIFIED_THRESHOLD,
    REVIEW_NOTE,
)

logger = logging.getLogger(__name__)


def check_age_appropriate(program: Program) -> bool:
    """Program's own age range is narrow and within youth bounds."""
    low, high = program.age_range.min, program.age_range.max
    return (high - low) <= MAX_PROGRAM_AGE_SPAN and low >= MIN_PROGRAM_AGE and high <= MAX_PROGRAM_AGE


def check_verified_organization(program: Program) -> bool:
    return (
        program.verified
        and bool(program.organization.strip())
        and bool(program.contact.phone or program.contact.email)
    )


def check_background_checked_staff(program: Program) -> bool:
    # No background-check data exists; capacity limits and listed
    # requirements stand in for a staffed program
    return program.capacity.max < STAFFED_CAPACITY_LIMIT and len(program.requirements) > 0


def check_safe_location(program: Program) -> bool:
    location_name = program.location.name.lower()
    return any(venue in location_name for venue in SAFE_VENUES)


def check_supervision(program: Program) -> bool:
    return (
        len(program.schedule.days) > 0
        and len(program.requirements) > 0
        and program.capacity.max < SUPERVISED_CAPACITY_LIMIT
    )


def check_content(program: Program) -> bool:
    text = f"{program.title} {program.description}".lower()
    return not any(keyword in text for keyword in INAPPROPRIATE_KEYWORDS)


CHECKS = {
    "age_appropriate": check_age_appropriate,
    "verified_organization": check_verified_organization,
    "background_checked_staff": check_background_checked_staff,
    "safe_location": check_safe_location,
    "appropriate_supervision": check_supervision,
    "no_inappropriate_content": check_content,
}


def validate(program: Program) -> SafetyCheck:
    """
    Perform the full safety check on a program.

    Args:
        program: Program record to check

    Returns:
        SafetyCheck with per-check results, overall score and flag
    """
    results: Dict[str, bool] = {name: CHECKS[name](program) for name in CHECK_NAMES}

    overall_score = sum(1 for passed in results.values() if passed) / len(results)
    flagged = overall_score < FLAG_THRESHOLD or not results["age_appropriate"]

    if flagged:
        failed = [name for name, passed in results.items() if not passed]
        logger.info(f"Program {program.id} flagged for review (score {overall_score:.2f}, failed: {failed})")

    return SafetyCheck(
        program_id=program.id,
        checks=SafetyChecks(**results),
        overall_score=overall_score,
        flagged=flagged,
        review_notes=REVIEW_NOTE if flagged else None,
        status=_status_for(overall_score, flagged),
    )


def validate_all(programs: List[Program]) -> List[SafetyCheck]:
    return [validate(p) for p in programs]


def safety_status(check: SafetyCheck) -> SafetyStatus:
    """
    Display tier for a report: verified, needs review, or concerns.
    """
    return _status_for(check.overall_score, check.flagged)


def _status_for(overall_score: float, flagged: bool) -> SafetyStatus:
    if not flagged and overall_score >= VERIFIED_THRESHOLD:
        return SafetyStatus.VERIFIED
    if flagged or overall_score < FLAG_THRESHOLD:
        return SafetyStatus.NEEDS_REVIEW
    return SafetyStatus.CONCERNS


def hide_flagged(programs: List[Program]) -> List[Program]:
    """
    Drop programs the validator flags. Ranking does not do this on its own.
    """
    kept = [p for p in programs if not validate(p).flagged]
    if len(kept) < len(programs):
        logger.info(f"Hid {len(programs) - len(kept)} flagged programs")
    return kept
