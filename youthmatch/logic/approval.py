"""
Parental approval policy for accepted matches.
"""

from .contracts import UserProfile
from .constants import MatchStatus, ADULT_AGE


def needs_parent_approval(profile: UserProfile) -> bool:
    """Minors whose settings require it need a parent to approve each match."""
    return profile.age < ADULT_AGE and profile.safety_settings.require_parent_approval


def initial_match_status(profile: UserProfile) -> MatchStatus:
    if needs_parent_approval(profile):
        return MatchStatus.PENDING
    return MatchStatus.APPROVED
