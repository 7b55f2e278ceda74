"""
Dimension Scorers

Individual scoring functions for each evaluation dimension.
Each scorer produces a normalized score between 0.0 and 1.0.
All logic is deterministic - the same inputs always give the same score.
"""

from typing import List

from .contracts import UserProfile, Program, DimensionScore
from .constants import (
    DIMENSION_WEIGHTS,
    NEUTRAL_SCORE,
    SCHEDULE_NO_OVERLAP_SCORE,
    LOCATION_NEUTRAL_SCORE,
    LOCATION_OUT_OF_RANGE_SCORE,
    LOCATION_MIN_IN_RANGE_SCORE,
    FREE_COST_SCORE,
    COST_SCORE_TIERS,
    COST_SCORE_FLOOR,
    MAX_SAFETY_RATING,
    SAFETY_BONUSES,
    SMALL_CAPACITY_LIMIT,
)
from .geo import distance_to_program


def check_age_appropriate(profile: UserProfile, program: Program) -> bool:
    """
    Hard age gate.

    The user's age must fall inside the program's range and, when the user set
    a positive max age difference, the range itself must be no wider than it.
    """
    age = profile.age
    low, high = program.age_range.min, program.age_range.max

    if age < low or age > high:
        return False

    max_difference = profile.safety_settings.max_age_difference
    if max_difference > 0 and (high - low) > max_difference:
        return False

    return True


def score_interest_match(profile: UserProfile, program: Program) -> DimensionScore:
    """
    Share of the program's categories the user is interested in.
    """
    if not profile.interests:
        raw_score = NEUTRAL_SCORE
        explanation = "No interests declared"
    else:
        interests = _normalize_tags(profile.interests)
        categories = _normalize_tags(program.categories)
        matching = categories & interests
        raw_score = len(matching) / max(len(categories), 1)
        explanation = f"{len(matching)} of {len(categories)} categories match"

    return _dimension("interest_match", raw_score, explanation)


def score_location(profile: UserProfile, program: Program) -> DimensionScore:
    """
    Proximity score from great-circle distance.

    Inside the max distance the score falls linearly from 1.0 (same spot) to
    0.5 (at the limit); outside it is a flat low score.
    """
    distance = distance_to_program(profile, program)
    max_distance = profile.preferences.max_distance

    if distance is None:
        return _dimension("location", LOCATION_NEUTRAL_SCORE, "Location unknown")

    if max_distance <= 0:
        raw_score = 1.0 if distance == 0 else LOCATION_OUT_OF_RANGE_SCORE
    elif distance <= max_distance:
        raw_score = 1.0 - (distance / max_distance) * (1.0 - LOCATION_MIN_IN_RANGE_SCORE)
    else:
        raw_score = LOCATION_OUT_OF_RANGE_SCORE

    return _dimension(
        "location",
        raw_score,
        f"{distance:.1f} mi away (max {max_distance:g} mi)",
    )


def score_schedule_match(profile: UserProfile, program: Program) -> DimensionScore:
    """
    Share of the program's days that fall on a day the user is available.
    """
    user_days = profile.preferences.days_available
    program_days = program.schedule.days

    if not user_days:
        return _dimension("schedule_match", NEUTRAL_SCORE, "No available days declared")

    matching = matching_days(program_days, user_days)

    if not matching:
        raw_score = SCHEDULE_NO_OVERLAP_SCORE
    else:
        raw_score = len(matching) / max(len(program_days), 1)

    return _dimension(
        "schedule_match",
        raw_score,
        f"{len(matching)} of {len(program_days)} days available",
    )


def score_cost_match(profile: UserProfile, program: Program) -> DimensionScore:
    """
    Step function of program cost; free programs score highest.
    """
    if program.cost.free:
        return _dimension("cost_match", FREE_COST_SCORE, "Free")

    amount = program.cost.amount
    raw_score = COST_SCORE_FLOOR
    for upper_bound, tier_score in COST_SCORE_TIERS:
        if amount <= upper_bound:
            raw_score = tier_score
            break

    return _dimension(
        "cost_match",
        raw_score,
        f"Cost: {amount:g} {program.cost.currency}",
    )


def score_safety(profile: UserProfile, program: Program) -> DimensionScore:
    """
    Safety sub-score from the program's own rating plus record bonuses.

    Separate from the safety validator; only fields on the record are used.
    """
    raw_score = program.safety_rating / MAX_SAFETY_RATING
    applied: List[str] = []

    if program.verified:
        raw_score += SAFETY_BONUSES["verified"]
        applied.append("verified")

    if program.requirements:
        raw_score += SAFETY_BONUSES["has_requirements"]
        applied.append("has_requirements")

    if program.contact.phone or program.contact.email:
        raw_score += SAFETY_BONUSES["has_contact"]
        applied.append("has_contact")

    if program.capacity.max < SMALL_CAPACITY_LIMIT:
        raw_score += SAFETY_BONUSES["small_capacity"]
        applied.append("small_capacity")

    bonuses = ", ".join(applied) if applied else "none"
    return _dimension(
        "safety",
        raw_score,
        f"Rating: {program.safety_rating}/{MAX_SAFETY_RATING}, Bonuses: {bonuses}",
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def matching_days(program_days: List[str], user_days: List[str]) -> List[str]:
    """Program days that overlap any of the user's days."""
    return [
        day for day in program_days
        if any(_fuzzy_match(day, user_day) for user_day in user_days)
    ]


def _fuzzy_match(term1: str, term2: str) -> bool:
    """Simple fuzzy matching - checks if either term contains the other."""
    t1 = term1.lower().strip()
    t2 = term2.lower().strip()
    if not t1 or not t2:
        return False
    return t1 in t2 or t2 in t1


def _normalize_tags(tags: List[str]) -> set:
    return {tag.lower().strip() for tag in tags if tag and tag.strip()}


def _dimension(dimension: str, raw_score: float, explanation: str) -> DimensionScore:
    """Clamp a raw score and attach its weight."""
    score = max(0.0, min(1.0, raw_score))
    weight = DIMENSION_WEIGHTS[dimension]
    return DimensionScore(
        dimension=dimension,
        score=score,
        weight=weight,
        weighted_score=score * weight,
        explanation=explanation,
    )
