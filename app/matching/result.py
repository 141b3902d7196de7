"""Compatibility result value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class CompatibilityLevel(str, Enum):
    excellent = "excellent"
    great = "great"
    good = "good"
    fair = "fair"
    low = "low"

    @classmethod
    def from_score(cls, score: float) -> CompatibilityLevel:
        """Half-open bins, lower edge inclusive."""
        for level, lower in LEVEL_THRESHOLDS:
            if score >= lower:
                return level
        return cls.low

    @property
    def label(self) -> str:
        return _LEVEL_DISPLAY[self][0]

    @property
    def color(self) -> str:
        return _LEVEL_DISPLAY[self][1]

    @property
    def icon(self) -> str:
        return _LEVEL_DISPLAY[self][2]


# Checked top-down; first lower bound reached wins.
LEVEL_THRESHOLDS: tuple[tuple[CompatibilityLevel, float], ...] = (
    (CompatibilityLevel.excellent, 0.8),
    (CompatibilityLevel.great, 0.65),
    (CompatibilityLevel.good, 0.5),
    (CompatibilityLevel.fair, 0.35),
)

_LEVEL_DISPLAY: dict[CompatibilityLevel, tuple[str, str, str]] = {
    CompatibilityLevel.excellent: ("Excellent Match", "green", "flame.fill"),
    CompatibilityLevel.great: ("Great Match", "blue", "star.fill"),
    CompatibilityLevel.good: ("Good Match", "purple", "hand.thumbsup.fill"),
    CompatibilityLevel.fair: ("Fair Match", "orange", "figure.walk"),
    CompatibilityLevel.low: ("Limited Compatibility", "gray", "questionmark.circle"),
}


@dataclass(frozen=True, slots=True)
class CompatibilityResult:
    """Outcome of scoring one pair. Holds no reference to the profiles."""

    overall_score: float
    factor_scores: Mapping[str, float]
    reasons: tuple[str, ...]
    level: CompatibilityLevel

    def __post_init__(self) -> None:
        # Freeze the mapping so the result cannot be mutated after construction.
        object.__setattr__(self, "factor_scores", MappingProxyType(dict(self.factor_scores)))
        object.__setattr__(self, "reasons", tuple(self.reasons))

    def top_reasons(self, n: int = 3) -> list[str]:
        return list(self.reasons[: max(n, 0)])

    @property
    def score_percentage(self) -> int:
        return int(self.overall_score * 100)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "score_percentage": self.score_percentage,
            "factor_scores": dict(self.factor_scores),
            "reasons": list(self.reasons),
            "level": self.level.value,
            "level_label": self.level.label,
        }
