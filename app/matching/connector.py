"""Profile store connector — read-only async access to user_profiles.

Table columns: user_id, workout_types, interests, preferred_times (JSONB
arrays or text[]), fitness_level, fitness_goal, gym, diet, bio, location
(text), latitude, longitude (double), is_active (bool).

Nothing here writes. Missing rows come back as None / [] and database
errors propagate to the caller.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.matching.profile import Profile

logger = structlog.get_logger(__name__)

_PROFILE_COLUMNS = (
    "user_id, workout_types, interests, fitness_level, fitness_goal, "
    "preferred_times, gym, latitude, longitude, diet, bio, location"
)


def row_to_profile(row: dict[str, Any]) -> Profile:
    return Profile.from_dict(dict(row))


async def fetch_profile(session: AsyncSession, user_id: str) -> Profile | None:
    """Load one profile by user_id. Returns None when the user is unknown."""
    query = f"SELECT {_PROFILE_COLUMNS} FROM user_profiles WHERE user_id = :user_id LIMIT 1"
    result = await session.execute(text(query), {"user_id": user_id})
    row = result.fetchone()
    if row is None:
        return None
    columns = result.keys()
    return row_to_profile(dict(zip(columns, row)))


async def fetch_candidate_profiles(
    session: AsyncSession,
    exclude_user_id: str | None = None,
    limit: int = 500,
) -> list[Profile]:
    """Load active profiles to rank against, excluding the subject."""
    query = f"SELECT {_PROFILE_COLUMNS} FROM user_profiles WHERE is_active = true"
    params: dict[str, Any] = {"limit": limit}
    if exclude_user_id is not None:
        query += " AND user_id != :exclude_user_id"
        params["exclude_user_id"] = exclude_user_id
    query += " ORDER BY user_id LIMIT :limit"

    result = await session.execute(text(query), params)
    columns = result.keys()
    profiles = [row_to_profile(dict(zip(columns, r))) for r in result.fetchall()]
    logger.debug("candidate_profiles_loaded", count=len(profiles), exclude_user_id=exclude_user_id)
    return profiles
