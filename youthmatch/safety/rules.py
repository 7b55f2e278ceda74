"""
Safety rules for the program validator.
Venue and keyword lists are matched case-insensitively by substring.
"""

from typing import List

# Check names in report order
CHECK_NAMES: List[str] = [
    "age_appropriate",
    "verified_organization",
    "background_checked_staff",
    "safe_location",
    "appropriate_supervision",
    "no_inappropriate_content",
]

# Public or well-known venue types
SAFE_VENUES: List[str] = [
    "library",
    "community center",
    "school",
    "park",
    "museum",
    "theater",
    "gym",
    "church",
    "mosque",
    "temple",
]

INAPPROPRIATE_KEYWORDS: List[str] = [
    "alcohol",
    "drinking",
    "smoking",
    "drugs",
    "party",
    "club",
    "adult",
    "mature",
    "explicit",
    "unsupervised",
]

# Program age range sanity
MAX_PROGRAM_AGE_SPAN = 10
MIN_PROGRAM_AGE = 0
MAX_PROGRAM_AGE = 25

# Capacity heuristics
STAFFED_CAPACITY_LIMIT = 100
SUPERVISED_CAPACITY_LIMIT = 50

# Aggregation
FLAG_THRESHOLD = 0.6
VERIFIED_THRESHOLD = 0.8
REVIEW_NOTE = "Program requires manual review"
