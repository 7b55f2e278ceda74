"""
youthmatch - youth activity program matching.

Scores and ranks programs for a user and checks programs against safety rules.
"""

from .logic import rank, score, get_match_explanation
from .safety import validate

__all__ = ["rank", "score", "get_match_explanation", "validate"]
