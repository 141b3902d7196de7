"""Batch ranking of one profile against many candidates.

Every pair is scored independently in a thread pool; the final order comes
from sorting on overall score once all scores are in, never from
completion order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable

import structlog

from app.matching.profile import Profile
from app.matching.result import CompatibilityResult
from app.matching.scorer import score

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RankedMatch:
    candidate_id: str
    result: CompatibilityResult


def _sort_key(match: RankedMatch) -> tuple[float, str]:
    return (-match.result.overall_score, match.candidate_id)


def rank_candidates(
    profile: Profile,
    candidates: Iterable[Profile],
    *,
    limit: int | None = None,
    min_score: float = 0.0,
    max_workers: int | None = None,
) -> list[RankedMatch]:
    """Score `profile` against each candidate and return the best first.

    Candidates sharing the subject's non-empty user_id are skipped. Ties on
    score are broken by candidate_id so output is stable.
    """
    pool = [
        c for c in candidates
        if not (profile.user_id and c.user_id == profile.user_id)
    ]
    if not pool:
        return []

    matches: list[RankedMatch] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(score, profile, c): c for c in pool}
        for future in as_completed(futures):
            candidate = futures[future]
            matches.append(RankedMatch(candidate_id=candidate.user_id, result=future.result()))

    matches = [m for m in matches if m.result.overall_score >= min_score]
    matches.sort(key=_sort_key)

    logger.debug(
        "candidates_ranked",
        user_id=profile.user_id,
        pool=len(pool),
        kept=len(matches),
        min_score=min_score,
    )

    if limit is not None:
        return matches[: max(limit, 0)]
    return matches
