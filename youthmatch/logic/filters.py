"""
Program Filters

Narrows the candidate list before ranking. Filtering never changes scores;
callers re-rank the narrowed list with engine.rank().
"""

import logging
import re
from typing import List, Optional

from .contracts import UserProfile, Program, ProgramFilters
from .constants import CostFilter, TimeOfDay, TIME_OF_DAY_BOUNDARIES
from .dimension_scorers import matching_days
from .geo import distance_to_program

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(?:([AaPp])\.?[Mm]\.?)?")


def apply_filters(
    profile: UserProfile,
    programs: List[Program],
    filters: ProgramFilters
) -> List[Program]:
    """
    Keep the programs that pass every active filter, preserving input order.

    Args:
        profile: Requesting user's profile (age, location)
        programs: Candidate programs
        filters: Active filter settings

    Returns:
        Filtered list of programs
    """
    filtered = [p for p in programs if _passes(profile, p, filters)]
    logger.info(f"Filters kept {len(filtered)} of {len(programs)} programs")
    return filtered


def _passes(profile: UserProfile, program: Program, filters: ProgramFilters) -> bool:
    if filters.categories:
        wanted = {c.lower().strip() for c in filters.categories}
        if not any(c.lower().strip() in wanted for c in program.categories):
            return False

    if filters.age_appropriate_only:
        if not program.age_range.min <= profile.age <= program.age_range.max:
            return False

    if filters.cost == CostFilter.FREE.value and not program.cost.free:
        return False
    if filters.cost == CostFilter.PAID.value and program.cost.free:
        return False

    if filters.max_distance is not None:
        distance = distance_to_program(profile, program)
        # Programs without coordinates are kept
        if distance is not None and distance > filters.max_distance:
            return False

    if filters.days and not matching_days(program.schedule.days, filters.days):
        return False

    wanted_times = [t for t in filters.time_of_day if t != TimeOfDay.ANY.value]
    if wanted_times:
        bucket = time_of_day_bucket(program.schedule.time)
        if bucket is not None and bucket not in wanted_times:
            return False

    if program.safety_rating < filters.min_safety_rating:
        return False

    return True


def time_of_day_bucket(time_window: str) -> Optional[str]:
    """
    Bucket a schedule window like "3:00 PM - 5:00 PM" by its start hour.

    When the start time carries no AM/PM marker, the first marker later in the
    window applies ("3-5pm" starts at 3 PM). A shared PM marker does not apply
    when the window crosses noon ("10-12 PM", "11 - 1 PM" start in the morning).
    Returns None when no start time can be read.
    """
    times = list(_TIME_PATTERN.finditer(time_window or ""))
    if not times:
        return None

    start = times[0]
    hour = int(start.group(1))
    meridiem = (start.group(3) or "").lower()

    if not meridiem:
        for later in times[1:]:
            if later.group(3):
                meridiem = later.group(3).lower()
                end_hour = int(later.group(1))
                if meridiem == "p" and hour < 12 and (end_hour == 12 or end_hour < hour):
                    meridiem = "a"
                break

    if meridiem == "p" and hour < 12:
        hour += 12
    elif meridiem == "a" and hour == 12:
        hour = 0

    if hour > 23:
        return None
    if hour < TIME_OF_DAY_BOUNDARIES[TimeOfDay.MORNING.value]:
        return TimeOfDay.MORNING.value
    if hour < TIME_OF_DAY_BOUNDARIES[TimeOfDay.AFTERNOON.value]:
        return TimeOfDay.AFTERNOON.value
    return TimeOfDay.EVENING.value
