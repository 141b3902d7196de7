"""Pure stateless factor functions — math only, never raises.

Each function maps a pair of profiles to a score in [0, 1]. Missing data
resolves to the documented neutral constant from `tables`, never to an
exception or a silent zero.
"""

from __future__ import annotations

import math
from typing import AbstractSet, Callable

from app.matching import tables
from app.matching.profile import Coordinate, Profile


def jaccard(left: AbstractSet[str], right: AbstractSet[str], neutral: float = tables.NEUTRAL_TAG_SCORE) -> float:
    """|A ∩ B| / |A ∪ B|. Returns `neutral` if either set is empty."""
    if not left or not right:
        return neutral
    return len(left & right) / len(left | right)


def haversine_miles(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in miles."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lon / 2) ** 2
    )
    # Clamp: rounding can push h marginally past 1 for antipodal points.
    h = min(max(h, 0.0), 1.0)
    return tables.EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def _is_usable(point: Coordinate | None) -> bool:
    return point is not None and math.isfinite(point.latitude) and math.isfinite(point.longitude)


def distance_between(a: Profile, b: Profile) -> float | None:
    """Distance in miles, or None unless both profiles carry finite coordinates."""
    if not _is_usable(a.coordinate) or not _is_usable(b.coordinate):
        return None
    return haversine_miles(a.coordinate, b.coordinate)


# ---------------------------------------------------------------------------
# Factor scores
# ---------------------------------------------------------------------------

def workout_type_score(a: Profile, b: Profile) -> float:
    return jaccard(a.workout_types, b.workout_types)


def fitness_level_score(a: Profile, b: Profile) -> float:
    """Coarse step function over ordinal distance: 0→1.0, 1→0.7, 2→0.4, 3+→0.2."""
    ia = tables.level_index(a.fitness_level)
    ib = tables.level_index(b.fitness_level)
    if ia is None or ib is None:
        return tables.NEUTRAL_LEVEL_SCORE
    distance = abs(ia - ib)
    if distance < len(tables.LEVEL_DISTANCE_SCORES):
        return tables.LEVEL_DISTANCE_SCORES[distance]
    return tables.LEVEL_FAR_SCORE


def fitness_goal_score(a: Profile, b: Profile) -> float:
    """Exact 1.0, table hit in either direction 0.75, otherwise 0.3."""
    goal_a, goal_b = a.fitness_goal, b.fitness_goal
    if goal_a is None or goal_b is None:
        return tables.GOAL_DEFAULT_SCORE
    if goal_a == goal_b:
        return tables.GOAL_EXACT_SCORE
    if goal_b in tables.get_compatible_goals(goal_a) or goal_a in tables.get_compatible_goals(goal_b):
        return tables.GOAL_COMPATIBLE_SCORE
    return tables.GOAL_DEFAULT_SCORE


def schedule_score(a: Profile, b: Profile) -> float:
    """Overlap relative to the smaller slot set.

    No shared slot at all is a near-disqualifier (0.1), distinct from no
    preference stated (0.5).
    """
    if not a.preferred_times or not b.preferred_times:
        return tables.NEUTRAL_SCHEDULE_SCORE
    shared = a.preferred_times & b.preferred_times
    if not shared:
        return tables.SCHEDULE_NO_OVERLAP_SCORE
    return len(shared) / min(len(a.preferred_times), len(b.preferred_times))


def _normalize_gym(name: str) -> str:
    return name.strip().lower()


def gym_location_score(a: Profile, b: Profile) -> float:
    gym_a = _normalize_gym(a.gym)
    gym_b = _normalize_gym(b.gym)
    distance = distance_between(a, b)

    if not gym_a or not gym_b:
        if distance is not None:
            return max(0.0, 1.0 - distance / tables.DISTANCE_DECAY_MILES)
        return tables.NEUTRAL_GYM_SCORE

    if gym_a == gym_b:
        return tables.GYM_EXACT_SCORE

    for chain in tables.GYM_CHAINS:
        if chain in gym_a and chain in gym_b:
            return tables.GYM_CHAIN_SCORE

    if distance is not None:
        if distance <= tables.NEARBY_MILES:
            return tables.GYM_NEARBY_SCORE
        if distance <= tables.SAME_AREA_MILES:
            return tables.GYM_SAME_AREA_SCORE

    return tables.GYM_DEFAULT_SCORE


def diet_score(a: Profile, b: Profile) -> float:
    """Exact 1.0, table hit 0.7, otherwise 0.4.

    The table is consulted from `a`'s entry only, so this factor is not
    symmetric for pairs the table lists one way (e.g. Keto / Low-Carb).
    """
    if a.diet is None or b.diet is None:
        return tables.NEUTRAL_DIET_SCORE
    if a.diet == b.diet:
        return tables.DIET_EXACT_SCORE
    if b.diet in tables.get_compatible_diets(a.diet):
        return tables.DIET_COMPATIBLE_SCORE
    return tables.DIET_DEFAULT_SCORE


def interest_score(a: Profile, b: Profile) -> float:
    return jaccard(a.interests, b.interests)


FACTOR_FUNCTIONS: dict[str, Callable[[Profile, Profile], float]] = {
    "workout_types": workout_type_score,
    "fitness_level": fitness_level_score,
    "fitness_goal": fitness_goal_score,
    "schedule": schedule_score,
    "gym_location": gym_location_score,
    "diet": diet_score,
    "interests": interest_score,
}


def compute_factor_scores(a: Profile, b: Profile) -> dict[str, float]:
    """All seven factor scores, keyed and ordered like `tables.FACTOR_WEIGHTS`."""
    return {name: FACTOR_FUNCTIONS[name](a, b) for name in tables.FACTOR_WEIGHTS}


def weighted_total(factor_scores: dict[str, float]) -> float:
    """Convex combination of factor scores, clamped to [0, 1]."""
    total = sum(factor_scores.get(name, 0.0) * weight for name, weight in tables.FACTOR_WEIGHTS.items())
    return min(max(total, 0.0), 1.0)
