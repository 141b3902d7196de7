"""Human-readable match reasons derived from factor scores.

Reasons are appended in factor evaluation order and never re-sorted;
callers wanting only the strongest signals take a prefix.
"""

from __future__ import annotations

from typing import Mapping

from app.matching.profile import Profile

WORKOUT_REASON_THRESHOLD = 0.7
LEVEL_REASON_THRESHOLD = 0.8
GOAL_REASON_THRESHOLD = 0.8
SCHEDULE_REASON_THRESHOLD = 0.7
SAME_GYM_THRESHOLD = 0.9
NEARBY_THRESHOLD = 0.5
INTEREST_REASON_THRESHOLD = 0.5


def shared_workout_types(a: Profile, b: Profile) -> list[str]:
    return sorted(a.workout_types & b.workout_types)


def shared_times(a: Profile, b: Profile) -> list[str]:
    return sorted(a.preferred_times & b.preferred_times)


def derive_reasons(a: Profile, b: Profile, factor_scores: Mapping[str, float]) -> list[str]:
    reasons: list[str] = []

    if factor_scores.get("workout_types", 0.0) > WORKOUT_REASON_THRESHOLD:
        shared = shared_workout_types(a, b)
        if shared:
            reasons.append(f"Both enjoy {' & '.join(shared[:2])}")

    if factor_scores.get("fitness_level", 0.0) > LEVEL_REASON_THRESHOLD:
        reasons.append("Similar fitness level")

    if factor_scores.get("fitness_goal", 0.0) > GOAL_REASON_THRESHOLD:
        reasons.append("Aligned fitness goals")

    if factor_scores.get("schedule", 0.0) > SCHEDULE_REASON_THRESHOLD:
        times = shared_times(a, b)
        if times:
            reasons.append(f"Available {times[0]}")

    gym = factor_scores.get("gym_location", 0.0)
    if gym > SAME_GYM_THRESHOLD:
        reasons.append("Same gym")
    elif gym > NEARBY_THRESHOLD:
        reasons.append("Nearby location")

    # Diet contributes to the score only; it has no reason string.

    if factor_scores.get("interests", 0.0) > INTEREST_REASON_THRESHOLD:
        reasons.append("Shared interests")

    return reasons
