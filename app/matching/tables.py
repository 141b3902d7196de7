"""Static scoring configuration — weights and compatibility tables.

Embedded configuration only: nothing here is read from the environment.
The goal and diet tables are hand-authored and not guaranteed symmetric.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Factor name → weight. Order is evaluation order.
FACTOR_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "workout_types": 0.25,
    "fitness_level": 0.20,
    "fitness_goal": 0.20,
    "schedule": 0.15,
    "gym_location": 0.10,
    "diet": 0.05,
    "interests": 0.05,
})

FITNESS_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced", "Athlete")

# Ordinal distance → score. Anything beyond the last step scores LEVEL_FAR_SCORE.
LEVEL_DISTANCE_SCORES: tuple[float, ...] = (1.0, 0.7, 0.4)
LEVEL_FAR_SCORE = 0.2

COMPATIBLE_GOALS: Mapping[str, frozenset[str]] = MappingProxyType({
    "Weight Loss": frozenset({"Weight Loss", "General Fitness", "Endurance"}),
    "Muscle Building": frozenset({"Muscle Building", "Strength Training", "Bodybuilding"}),
    "Strength Training": frozenset({"Strength Training", "Muscle Building", "Powerlifting"}),
    "Endurance": frozenset({"Endurance", "Marathon Training", "Cardio", "Weight Loss"}),
    "General Fitness": frozenset({"General Fitness", "Weight Loss", "Endurance", "Flexibility"}),
    "Flexibility": frozenset({"Flexibility", "Yoga", "General Fitness"}),
    "Sports Training": frozenset({"Sports Training", "Endurance", "Strength Training"}),
    "Rehabilitation": frozenset({"Rehabilitation", "Flexibility", "General Fitness"}),
    "Bodybuilding": frozenset({"Bodybuilding", "Muscle Building", "Strength Training"}),
    "Powerlifting": frozenset({"Powerlifting", "Strength Training", "Muscle Building"}),
    "CrossFit": frozenset({"CrossFit", "General Fitness", "Strength Training", "Endurance"}),
    "Marathon Training": frozenset({"Marathon Training", "Endurance", "Cardio"}),
    "Yoga": frozenset({"Yoga", "Flexibility", "General Fitness"}),
    "Cardio": frozenset({"Cardio", "Endurance", "Weight Loss"}),
})

COMPATIBLE_DIETS: Mapping[str, frozenset[str]] = MappingProxyType({
    "Vegan": frozenset({"Vegan", "Vegetarian", "Plant-Based"}),
    "Vegetarian": frozenset({"Vegetarian", "Vegan", "Pescatarian"}),
    "Keto": frozenset({"Keto", "Low-Carb", "Paleo"}),
    "Paleo": frozenset({"Paleo", "Keto", "Whole30"}),
    "High-Protein": frozenset({"High-Protein", "Bodybuilding", "Keto"}),
    "No Restrictions": frozenset({"No Restrictions", "Flexible", "High-Protein"}),
})

# Lower-case substrings identifying gym chains.
GYM_CHAINS: tuple[str, ...] = (
    "planet fitness",
    "24 hour fitness",
    "la fitness",
    "gold's gym",
    "equinox",
    "crunch",
    "anytime fitness",
    "orangetheory",
    "crossfit",
    "ymca",
    "lifetime",
)

EARTH_RADIUS_MILES = 3958.8
NEARBY_MILES = 5.0
SAME_AREA_MILES = 15.0
DISTANCE_DECAY_MILES = 50.0

# Neutral / default sub-scores. These differ per factor and are part of the contract.
NEUTRAL_TAG_SCORE = 0.5
NEUTRAL_LEVEL_SCORE = 0.5
GOAL_EXACT_SCORE = 1.0
GOAL_COMPATIBLE_SCORE = 0.75
GOAL_DEFAULT_SCORE = 0.3
NEUTRAL_SCHEDULE_SCORE = 0.5
SCHEDULE_NO_OVERLAP_SCORE = 0.1
GYM_EXACT_SCORE = 1.0
GYM_CHAIN_SCORE = 0.8
GYM_NEARBY_SCORE = 0.6
GYM_SAME_AREA_SCORE = 0.4
GYM_DEFAULT_SCORE = 0.2
NEUTRAL_GYM_SCORE = 0.3
NEUTRAL_DIET_SCORE = 0.5
DIET_EXACT_SCORE = 1.0
DIET_COMPATIBLE_SCORE = 0.7
DIET_DEFAULT_SCORE = 0.4


def get_compatible_goals(goal: str) -> frozenset[str]:
    return COMPATIBLE_GOALS.get(goal, frozenset())


def get_compatible_diets(diet: str) -> frozenset[str]:
    return COMPATIBLE_DIETS.get(diet, frozenset())


def level_index(level: str | None) -> int | None:
    if level is None or level not in FITNESS_LEVELS:
        return None
    return FITNESS_LEVELS.index(level)
