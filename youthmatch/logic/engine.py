"""
Ranking Engine

Entry point for scoring and ranking programs for a user.

Pipeline flow:
1. Scoring - Age gate, then score each dimension independently
2. Aggregation - Combine dimension scores, bonuses and reasons
3. Filtering - Drop age-inappropriate (zero score) programs
4. Ranking - Sort by score, program id breaks ties

Every function here is stateless: the user and program list are passed in
explicitly on each call, so re-ranking after a filter change is simply another
call with the narrowed list.
"""

import logging
import time
from typing import List, Tuple

from .contracts import UserProfile, Program, MatchScore
from .aggregator import aggregate_scores, batch_aggregate
from .ranker import rank_candidates, drop_unmatched

logger = logging.getLogger(__name__)


def score(profile: UserProfile, program: Program) -> MatchScore:
    """
    Score a single program for a user.
    """
    return aggregate_scores(profile, program)


def score_all(profile: UserProfile, programs: List[Program]) -> List[MatchScore]:
    """
    Score every program, keeping input order.
    """
    return batch_aggregate(profile, programs)


def rank_with_scores(
    profile: UserProfile,
    programs: List[Program]
) -> List[Tuple[Program, MatchScore]]:
    """
    Score, drop zero scores and sort.

    Args:
        profile: Requesting user's profile
        programs: Candidate programs

    Returns:
        (program, score) pairs, best match first
    """
    start_time = time.perf_counter()

    scores = score_all(profile, programs)
    scored = list(zip(programs, scores))

    eligible = drop_unmatched(scored)
    ranked = rank_candidates(eligible)

    processing_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Ranked {len(ranked)} of {len(programs)} programs for user "
        f"{profile.id} ({processing_time:.2f}ms)"
    )
    if programs and not ranked:
        logger.warning(f"No age-appropriate programs for user {profile.id}")

    return ranked


def rank(profile: UserProfile, programs: List[Program]) -> List[Program]:
    """
    Programs sorted by descending match score, without the zero scores.
    """
    return [program for program, _ in rank_with_scores(profile, programs)]


def get_match_explanation(profile: UserProfile, program: Program) -> List[str]:
    """
    Reasons shown next to a single program card.
    """
    return score(profile, program).reasons
