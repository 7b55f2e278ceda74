"""
Ranking Engine Constants

Defines the weights, step tables, bonuses, thresholds, reason strings and enums
used by the ranking engine.
All values are deterministic - no randomness anywhere in scoring.
"""

from enum import Enum
from typing import Dict, List, Tuple

# =============================================================================
# ENUMS
# =============================================================================

class TimeOfDay(str, Enum):
    """Preferred time of day for a program session."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY = "any"


class Frequency(str, Enum):
    """How often a program meets."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ONE_TIME = "one-time"


class ProgramSource(str, Enum):
    """Where a program record was collected from."""
    SEATTLE_GOV = "seattle.gov"
    PARTNER = "partner"
    SOCIAL = "social"
    MANUAL = "manual"


class CostFilter(str, Enum):
    """Free/paid narrowing applied before ranking."""
    ALL = "all"
    FREE = "free"
    PAID = "paid"


class MatchStatus(str, Enum):
    """Initial status of a match the user accepted."""
    PENDING = "pending"
    APPROVED = "approved"


class SafetyStatus(str, Enum):
    """Display tier for a safety report."""
    VERIFIED = "verified"
    NEEDS_REVIEW = "needs_review"
    CONCERNS = "concerns"


# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# Weights for each scoring dimension (must sum to 1.0)
DIMENSION_WEIGHTS: Dict[str, float] = {
    "interest_match": 0.40,   # Program categories vs user interests
    "location": 0.20,         # Distance vs max distance preference
    "schedule_match": 0.20,   # Program days vs available days
    "cost_match": 0.10,       # Cheaper is better
    "safety": 0.10,           # Safety rating plus record bonuses
}

# =============================================================================
# NEUTRAL / FLOOR SCORES
# =============================================================================

NEUTRAL_SCORE = 0.5            # Used when the user declared no preference
SCHEDULE_NO_OVERLAP_SCORE = 0.1

# Location
LOCATION_NEUTRAL_SCORE = 0.5   # Coordinates missing on either side
LOCATION_OUT_OF_RANGE_SCORE = 0.2
LOCATION_MIN_IN_RANGE_SCORE = 0.5  # Score exactly at the max distance
EARTH_RADIUS_MILES = 3958.8

# =============================================================================
# COST TIERS
# =============================================================================

FREE_COST_SCORE = 1.0

# (upper bound inclusive, score) - checked in order
COST_SCORE_TIERS: List[Tuple[float, float]] = [
    (50, 0.9),
    (100, 0.7),
    (200, 0.5),
    (500, 0.3),
]
COST_SCORE_FLOOR = 0.1

# =============================================================================
# SAFETY SUB-SCORE
# =============================================================================

MAX_SAFETY_RATING = 5

SAFETY_BONUSES: Dict[str, float] = {
    "verified": 0.2,
    "has_requirements": 0.1,
    "has_contact": 0.1,
    "small_capacity": 0.1,
}

# Capacity below this suggests supervised group sizes
SMALL_CAPACITY_LIMIT = 50

# =============================================================================
# FLAT SCORE BONUSES
# =============================================================================

# Decimal places kept on the final score
SCORE_PRECISION = 9

VERIFIED_BONUS = 0.10
SCHOLARSHIP_BONUS = 0.05
SCHOLARSHIP_MIN_COST = 100  # Bonus only applies when cost is above this

# =============================================================================
# REASONS
# =============================================================================

NOT_AGE_APPROPRIATE_REASON = "Not age appropriate"

# Sub-score thresholds that earn a reason string (strictly greater than)
REASON_THRESHOLDS: Dict[str, float] = {
    "interest_match": 0.7,
    "location": 0.8,
    "schedule_match": 0.8,
    "cost_match": 0.8,
    "safety": 0.9,
}

REASON_MESSAGES: Dict[str, str] = {
    "interest_match": "Matches your interests",
    "location": "Close to your location",
    "schedule_match": "Fits your schedule",
    "cost_match": "Good value for money",
    "safety": "Highly rated for safety",
    "verified": "Verified organization",
    "scholarship": "Scholarships available",
}

# =============================================================================
# FILTERS
# =============================================================================

# Start hour boundaries for time-of-day buckets (24h clock, exclusive upper)
TIME_OF_DAY_BOUNDARIES: Dict[str, int] = {
    TimeOfDay.MORNING.value: 12,
    TimeOfDay.AFTERNOON.value: 17,
}

# =============================================================================
# PARENTAL APPROVAL
# =============================================================================

ADULT_AGE = 18
