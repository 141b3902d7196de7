"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.db import get_session
from app.main import app
from app.matching.profile import Coordinate, Profile


# ---------------------------------------------------------------------------
# Fake DB session (no real Postgres needed)
# ---------------------------------------------------------------------------

class FakeSession:
    """Minimal stand-in for AsyncSession; records executed statements."""

    def __init__(self, rows: list[dict[str, Any]] | None = None):
        self._rows = rows or []
        self.executed: list[tuple[str, dict[str, Any] | None]] = []

    async def execute(self, stmt, params=None):
        self.executed.append((str(stmt), params))
        return FakeResult(self._rows)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeResult:
    def __init__(self, rows: list[dict[str, Any]]):
        self._rows = rows
        self._keys = list(rows[0].keys()) if rows else []

    def keys(self):
        return self._keys

    def fetchall(self):
        return [tuple(r[k] for k in self._keys) for r in self._rows]

    def fetchone(self):
        rows = self.fetchall()
        return rows[0] if rows else None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_session():
    """Return a FakeSession with no rows (override _rows in tests if needed)."""
    return FakeSession()


@pytest.fixture()
def override_session(fake_session):
    """Override the FastAPI dependency so no real DB is needed."""
    async def _override():
        yield fake_session

    app.dependency_overrides[get_session] = _override
    yield fake_session
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_session):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_profile(
    user_id: str = "u1",
    workout_types: tuple[str, ...] = (),
    interests: tuple[str, ...] = (),
    fitness_level: str | None = None,
    fitness_goal: str | None = None,
    preferred_times: tuple[str, ...] = (),
    gym: str = "",
    coordinate: tuple[float, float] | None = None,
    diet: str | None = None,
    bio: str = "",
    location: str = "",
) -> Profile:
    """Helper to build a Profile with tuple shorthand for the tag sets."""
    return Profile(
        user_id=user_id,
        workout_types=frozenset(workout_types),
        interests=frozenset(interests),
        fitness_level=fitness_level,
        fitness_goal=fitness_goal,
        preferred_times=frozenset(preferred_times),
        gym=gym,
        coordinate=Coordinate(*coordinate) if coordinate else None,
        diet=diet,
        bio=bio,
        location=location,
    )


def full_profile(user_id: str = "u1", **overrides: Any) -> Profile:
    """A profile with every scored field filled."""
    fields: dict[str, Any] = dict(
        user_id=user_id,
        workout_types=("Running", "Yoga", "Cycling", "Swimming"),
        interests=("Hiking", "Music", "Cooking"),
        fitness_level="Intermediate",
        fitness_goal="Endurance",
        preferred_times=("Morning", "Evening"),
        gym="Planet Fitness Downtown",
        coordinate=(40.7128, -74.0060),
        diet="Vegan",
    )
    fields.update(overrides)
    return make_profile(**fields)


def make_profile_row(user_id: str, **fields: Any) -> dict[str, Any]:
    """Helper to build a fake user_profiles row dict."""
    row: dict[str, Any] = {
        "user_id": user_id,
        "workout_types": [],
        "interests": [],
        "fitness_level": None,
        "fitness_goal": None,
        "preferred_times": [],
        "gym": None,
        "latitude": None,
        "longitude": None,
        "diet": None,
        "bio": None,
        "location": None,
    }
    row.update(fields)
    return row
