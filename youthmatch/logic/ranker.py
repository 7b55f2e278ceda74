"""
Ranker

Orders scored programs for display.
"""

from typing import List, Tuple

from .contracts import Program, MatchScore

ScoredProgram = Tuple[Program, MatchScore]


def _ranking_key(item: ScoredProgram):
    program, match = item
    # Highest score first; equal scores fall back to program id ascending
    return (-match.score, program.id)


def drop_unmatched(scored: List[ScoredProgram]) -> List[ScoredProgram]:
    """
    Remove programs with a zero score (age gate failures).
    """
    return [(program, match) for program, match in scored if match.score > 0]


def rank_candidates(scored: List[ScoredProgram]) -> List[ScoredProgram]:
    """
    Rank scored programs by match score (descending).

    Args:
        scored: (program, score) pairs in any order

    Returns:
        Sorted pairs; the result does not depend on input order
    """
    return sorted(scored, key=_ranking_key)
