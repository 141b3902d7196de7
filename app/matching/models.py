"""HTTP contract for /matching — Pydantic v2 models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.matching.profile import Profile
from app.matching.ranking import RankedMatch
from app.matching.result import CompatibilityResult
from app.matching.starters import ConversationStarter


class CoordinateIn(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    latitude: float
    longitude: float


class ProfileIn(BaseModel):
    user_id: str = ""
    workout_types: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    fitness_level: str | None = None  # Beginner | Intermediate | Advanced | Athlete
    fitness_goal: str | None = None
    preferred_times: list[str] = Field(default_factory=list)
    gym: str = ""
    coordinate: CoordinateIn | None = None
    diet: str | None = None
    bio: str = ""
    location: str = ""

    def to_profile(self) -> Profile:
        return Profile.from_dict(self.model_dump())


class PairRequest(BaseModel):
    a: ProfileIn
    b: ProfileIn


class RankRequest(BaseModel):
    profile: ProfileIn
    candidates: list[ProfileIn] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)


class CompatibilityOut(BaseModel):
    overall_score: float
    score_percentage: int
    factor_scores: dict[str, float]
    reasons: list[str] = Field(default_factory=list)
    top_reasons: list[str] = Field(default_factory=list)
    level: str  # excellent | great | good | fair | low
    level_label: str
    color: str
    icon: str

    @classmethod
    def from_result(cls, result: CompatibilityResult, top_n: int = 3) -> CompatibilityOut:
        return cls(
            overall_score=result.overall_score,
            score_percentage=result.score_percentage,
            factor_scores=dict(result.factor_scores),
            reasons=list(result.reasons),
            top_reasons=result.top_reasons(top_n),
            level=result.level.value,
            level_label=result.level.label,
            color=result.level.color,
            icon=result.level.icon,
        )


class RankedMatchOut(BaseModel):
    rank: int
    candidate_id: str
    compatibility: CompatibilityOut

    @classmethod
    def from_ranked(cls, rank: int, match: RankedMatch, top_n: int = 3) -> RankedMatchOut:
        return cls(
            rank=rank,
            candidate_id=match.candidate_id,
            compatibility=CompatibilityOut.from_result(match.result, top_n),
        )


class StarterOut(BaseModel):
    text: str
    icon: str
    category: str

    @classmethod
    def from_starter(cls, starter: ConversationStarter) -> StarterOut:
        return cls(text=starter.text, icon=starter.icon, category=starter.category.value)
