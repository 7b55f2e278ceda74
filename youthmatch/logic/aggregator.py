"""
Score Aggregator

Combines individual dimension scores into the final match score.
Applies the flat bonuses, caps the result and generates reasons.
"""

import logging
from typing import List, Dict

from .contracts import UserProfile, Program, DimensionScore, MatchScore
from .dimension_scorers import (
    check_age_appropriate,
    score_interest_match,
    score_location,
    score_schedule_match,
    score_cost_match,
    score_safety,
)
from .constants import (
    VERIFIED_BONUS,
    SCHOLARSHIP_BONUS,
    SCHOLARSHIP_MIN_COST,
    SCORE_PRECISION,
    NOT_AGE_APPROPRIATE_REASON,
    REASON_THRESHOLDS,
    REASON_MESSAGES,
)

logger = logging.getLogger(__name__)

# Order matters: reasons are emitted in this order
SCORERS = [
    score_interest_match,
    score_location,
    score_schedule_match,
    score_cost_match,
    score_safety,
]


def aggregate_scores(
    profile: UserProfile,
    program: Program
) -> MatchScore:
    """
    Compute all dimension scores and aggregate into the match score.

    Args:
        profile: Requesting user's profile
        program: Program to score

    Returns:
        MatchScore with sub-scores, reasons and age gate result
    """
    if not check_age_appropriate(profile, program):
        logger.debug(f"Program {program.id} not age appropriate for age {profile.age}")
        return MatchScore(
            program_id=program.id,
            score=0.0,
            reasons=[NOT_AGE_APPROPRIATE_REASON],
            age_appropriate=False,
        )

    dimension_scores: Dict[str, DimensionScore] = {}
    for scorer in SCORERS:
        dimension = scorer(profile, program)
        dimension_scores[dimension.dimension] = dimension

    total_score = sum(d.weighted_score for d in dimension_scores.values())
    reasons = _build_reasons(dimension_scores)

    if program.verified:
        total_score += VERIFIED_BONUS
        reasons.append(REASON_MESSAGES["verified"])

    if _scholarship_applies(program):
        total_score += SCHOLARSHIP_BONUS
        reasons.append(REASON_MESSAGES["scholarship"])

    # Clamp to 0-1; rounded so equal totals compare equal
    total_score = round(max(0.0, min(1.0, total_score)), SCORE_PRECISION)

    logger.debug(f"Program {program.id} scored {total_score:.3f}")

    return MatchScore(
        program_id=program.id,
        score=total_score,
        reasons=reasons,
        safety_score=dimension_scores["safety"].score,
        interest_match=dimension_scores["interest_match"].score,
        location_score=dimension_scores["location"].score,
        schedule_match=dimension_scores["schedule_match"].score,
        cost_match=dimension_scores["cost_match"].score,
        age_appropriate=True,
        dimension_scores=list(dimension_scores.values()),
    )


def batch_aggregate(
    profile: UserProfile,
    programs: List[Program]
) -> List[MatchScore]:
    """
    Score multiple programs in batch. Output order follows input order.
    """
    return [aggregate_scores(profile, p) for p in programs]


def _build_reasons(dimension_scores: Dict[str, DimensionScore]) -> List[str]:
    reasons: List[str] = []
    for dimension, threshold in REASON_THRESHOLDS.items():
        if dimension_scores[dimension].score > threshold:
            reasons.append(REASON_MESSAGES[dimension])
    return reasons


def _scholarship_applies(program: Program) -> bool:
    return bool(program.cost.scholarship) and program.cost.amount > SCHOLARSHIP_MIN_COST
