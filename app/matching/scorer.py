"""Compatibility scorer.

score(a, b) = weighted factor scores + reasons + level.
Total and deterministic: no randomness, clock, I/O or logging.
"""

from __future__ import annotations

from app.matching.factors import compute_factor_scores, weighted_total
from app.matching.profile import Profile
from app.matching.reasons import derive_reasons
from app.matching.result import CompatibilityLevel, CompatibilityResult


def score(a: Profile, b: Profile) -> CompatibilityResult:
    factor_scores = compute_factor_scores(a, b)
    overall = weighted_total(factor_scores)
    return CompatibilityResult(
        overall_score=overall,
        factor_scores=factor_scores,
        reasons=tuple(derive_reasons(a, b, factor_scores)),
        level=CompatibilityLevel.from_score(overall),
    )
