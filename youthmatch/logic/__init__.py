"""
Ranking Logic Module

Provides the deterministic ranking engine for youth program matching.
"""

from .contracts import (
    Program,
    UserProfile,
    ProgramFilters,
    MatchScore,
    DimensionScore,
    SafetyCheck,
    SafetyChecks,
    Coordinates,
)
from .engine import score, score_all, rank, rank_with_scores, get_match_explanation
from .filters import apply_filters
from .approval import needs_parent_approval, initial_match_status
from .constants import MatchStatus, SafetyStatus

__all__ = [
    # Main engine
    "score",
    "score_all",
    "rank",
    "rank_with_scores",
    "get_match_explanation",
    "apply_filters",
    "needs_parent_approval",
    "initial_match_status",

    # Contracts
    "Program",
    "UserProfile",
    "ProgramFilters",
    "MatchScore",
    "DimensionScore",
    "SafetyCheck",
    "SafetyChecks",
    "Coordinates",

    # Enums
    "MatchStatus",
    "SafetyStatus",
]
