"""Matching HTTP router."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import verify_api_key
from app.config import settings
from app.db import get_session
from app.matching import connector
from app.matching.models import (
    CompatibilityOut,
    PairRequest,
    RankedMatchOut,
    RankRequest,
    StarterOut,
)
from app.matching.ranking import RankedMatch, rank_candidates
from app.matching.scorer import score
from app.matching.starters import generate_starters

router = APIRouter(prefix="/matching", tags=["matching"])

logger = structlog.get_logger(__name__)


def _ranked_out(matches: list[RankedMatch]) -> list[RankedMatchOut]:
    return [
        RankedMatchOut.from_ranked(i, m, settings.top_reasons_count)
        for i, m in enumerate(matches, start=1)
    ]


def _effective_limit(limit: int | None) -> int:
    if limit is None:
        return settings.rank_default_limit
    return min(limit, settings.rank_max_limit)


# ---------------------------------------------------------------------------
# /matching/score
# ---------------------------------------------------------------------------


@router.post("/score", response_model=CompatibilityOut)
async def score_pair(
    body: PairRequest,
    _: str = Depends(verify_api_key),
) -> CompatibilityOut:
    result = score(body.a.to_profile(), body.b.to_profile())
    logger.info(
        "pair_scored",
        a=body.a.user_id or None,
        b=body.b.user_id or None,
        overall_score=round(result.overall_score, 4),
        level=result.level.value,
    )
    return CompatibilityOut.from_result(result, settings.top_reasons_count)


# ---------------------------------------------------------------------------
# /matching/rank
# ---------------------------------------------------------------------------


@router.post("/rank", response_model=list[RankedMatchOut])
async def rank(
    body: RankRequest,
    _: str = Depends(verify_api_key),
) -> list[RankedMatchOut]:
    matches = await run_in_threadpool(
        rank_candidates,
        body.profile.to_profile(),
        [c.to_profile() for c in body.candidates],
        limit=_effective_limit(body.limit),
        min_score=body.min_score,
        max_workers=settings.rank_max_workers,
    )
    logger.info("rank_request", candidates=len(body.candidates), returned=len(matches))
    return _ranked_out(matches)


# ---------------------------------------------------------------------------
# /matching/starters
# ---------------------------------------------------------------------------


@router.post("/starters", response_model=list[StarterOut])
async def starters(
    body: PairRequest,
    _: str = Depends(verify_api_key),
) -> list[StarterOut]:
    return [StarterOut.from_starter(s) for s in generate_starters(body.a.to_profile(), body.b.to_profile())]


# ---------------------------------------------------------------------------
# /matching/users/{user_id}/matches
# ---------------------------------------------------------------------------


@router.get("/users/{user_id}/matches", response_model=list[RankedMatchOut])
async def user_matches(
    user_id: str,
    session: AsyncSession = Depends(get_session),
    _: str = Depends(verify_api_key),
    limit: int | None = Query(default=None, ge=1, description="Max matches returned"),
    min_score: float = Query(default=0.0, ge=0.0, le=1.0, description="Drop matches below this score"),
) -> list[RankedMatchOut]:
    profile = await connector.fetch_profile(session, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Unknown user: {user_id}")

    candidates = await connector.fetch_candidate_profiles(
        session, exclude_user_id=user_id, limit=settings.candidate_pool_size
    )
    matches = await run_in_threadpool(
        rank_candidates,
        profile,
        candidates,
        limit=_effective_limit(limit),
        min_score=min_score,
        max_workers=settings.rank_max_workers,
    )
    logger.info("user_matches", user_id=user_id, pool=len(candidates), returned=len(matches))
    return _ranked_out(matches)
