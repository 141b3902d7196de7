"""Profile value objects consumed by the scorer.

Profiles are read-only snapshots supplied by the profile store (or a
request body). `Profile.from_dict` absorbs messy row / payload shapes;
it never raises, unusable values simply become absent.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Profile:
    user_id: str = ""
    workout_types: frozenset[str] = field(default_factory=frozenset)
    interests: frozenset[str] = field(default_factory=frozenset)
    fitness_level: str | None = None
    fitness_goal: str | None = None
    preferred_times: frozenset[str] = field(default_factory=frozenset)
    gym: str = ""
    coordinate: Coordinate | None = None
    diet: str | None = None

    # Only read by conversation starters, never by scoring.
    bio: str = ""
    location: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Profile:
        """Build a Profile from a store row or API payload.

        Accepts alternative key names (``gym_location``, ``preferred_workout_times``,
        ``lat``/``lon`` ...), JSON-encoded or comma-separated tag lists, and
        ``None`` anywhere.
        """
        if not isinstance(raw, dict):
            return cls()

        coordinate = None
        nested = raw.get("coordinate")
        if isinstance(nested, dict):
            lat = _parse_float(nested.get("latitude", nested.get("lat")))
            lon = _parse_float(nested.get("longitude", nested.get("lon")))
        else:
            lat = _parse_float(_first(raw, ("latitude", "lat")))
            lon = _parse_float(_first(raw, ("longitude", "lon", "lng")))
        if lat is not None and lon is not None:
            coordinate = Coordinate(latitude=lat, longitude=lon)

        return cls(
            user_id=_normalize_string(_first(raw, ("user_id", "id", "uid"))),
            workout_types=_normalize_tags(_first(raw, ("workout_types", "workouts"))),
            interests=_normalize_tags(raw.get("interests")),
            fitness_level=_optional_string(raw.get("fitness_level")),
            fitness_goal=_optional_string(raw.get("fitness_goal")),
            preferred_times=_normalize_tags(
                _first(raw, ("preferred_times", "preferred_workout_times", "workout_times"))
            ),
            gym=_normalize_string(_first(raw, ("gym", "gym_location", "gym_name"))),
            coordinate=coordinate,
            diet=_optional_string(raw.get("diet")),
            bio=_normalize_string(raw.get("bio")),
            location=_normalize_string(raw.get("location")),
        )


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------

def _first(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _normalize_string(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_string(value: Any) -> str | None:
    text = _normalize_string(value)
    return text or None


def _normalize_tags(value: Any) -> frozenset[str]:
    """Coerce list / set / JSON array string / comma string to a tag set."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                value = json.loads(stripped)
            except json.JSONDecodeError:
                value = stripped.strip("[]").split(",")
        else:
            value = stripped.split(",")
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    tags = (_normalize_string(item) for item in value if item is not None)
    return frozenset(t for t in tags if t)


def _parse_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        parsed = float(value)
    except (ValueError, OverflowError):
        return None
    # inf / nan coordinates are treated as absent.
    return parsed if math.isfinite(parsed) else None
