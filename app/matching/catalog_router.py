"""Scoring catalog endpoint: weights, scales and tables behind every score."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.auth import verify_api_key
from app.matching import tables
from app.matching.result import LEVEL_THRESHOLDS, CompatibilityLevel

router = APIRouter(prefix="/matching", tags=["catalog"])


def _level_entries() -> list[dict]:
    bounds = {level: lower for level, lower in LEVEL_THRESHOLDS}
    return [
        {
            "level": level.value,
            "label": level.label,
            "color": level.color,
            "icon": level.icon,
            "min_score": bounds.get(level, 0.0),
        }
        for level in CompatibilityLevel
    ]


@router.get("/catalog")
async def get_catalog(
    _: str = Depends(verify_api_key),
) -> dict:
    """Static scoring configuration, for clients explaining a score.

    Tables are returned as authored; goal lookups are checked in both
    directions, diet lookups only from the scoring user's entry.
    """
    return {
        "weights": dict(tables.FACTOR_WEIGHTS),
        "fitness_levels": list(tables.FITNESS_LEVELS),
        "compatible_goals": {k: sorted(v) for k, v in tables.COMPATIBLE_GOALS.items()},
        "compatible_diets": {k: sorted(v) for k, v in tables.COMPATIBLE_DIETS.items()},
        "gym_chains": list(tables.GYM_CHAINS),
        "levels": _level_entries(),
    }
