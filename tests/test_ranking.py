"""Tests for batch ranking."""

from __future__ import annotations

import time
from unittest.mock import patch

from app.matching.ranking import rank_candidates
from app.matching.result import CompatibilityLevel, CompatibilityResult
from app.matching.scorer import score
from tests.conftest import full_profile, make_profile


def _candidates():
    return [
        make_profile("far", fitness_level="Athlete", preferred_times=("Night",)),
        full_profile("twin"),
        full_profile("close", fitness_level="Advanced", diet="Keto"),
        make_profile("blank"),
    ]


class TestRankCandidates:
    def test_sorted_by_score_desc(self):
        subject = full_profile("me")
        ranked = rank_candidates(subject, _candidates())
        scores = [m.result.overall_score for m in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0].candidate_id == "twin"

    def test_matches_pairwise_scores(self):
        subject = full_profile("me")
        ranked = rank_candidates(subject, _candidates())
        for m in ranked:
            candidate = next(c for c in _candidates() if c.user_id == m.candidate_id)
            assert m.result == score(subject, candidate)

    def test_limit(self):
        ranked = rank_candidates(full_profile("me"), _candidates(), limit=2)
        assert [m.candidate_id for m in ranked] == ["twin", "close"]

    def test_min_score(self):
        ranked = rank_candidates(full_profile("me"), _candidates(), min_score=0.9)
        assert all(m.result.overall_score >= 0.9 for m in ranked)
        assert "blank" not in {m.candidate_id for m in ranked}

    def test_skips_self(self):
        subject = full_profile("me")
        ranked = rank_candidates(subject, [subject, full_profile("other")])
        assert [m.candidate_id for m in ranked] == ["other"]

    def test_empty_pool(self):
        assert rank_candidates(full_profile("me"), []) == []

    def test_ties_broken_by_candidate_id(self):
        ranked = rank_candidates(make_profile("me"), [make_profile("c"), make_profile("a"), make_profile("b")])
        assert [m.candidate_id for m in ranked] == ["a", "b", "c"]

    def test_order_independent_of_completion_order(self):
        # The best candidate finishes last; output order must still follow score.
        delays = {"best": 0.15, "mid": 0.05, "worst": 0.0}
        values = {"best": 0.9, "mid": 0.6, "worst": 0.2}

        def _slow_score(a, b):
            time.sleep(delays[b.user_id])
            v = values[b.user_id]
            return CompatibilityResult(v, {}, (), CompatibilityLevel.from_score(v))

        pool = [make_profile("worst"), make_profile("mid"), make_profile("best")]
        with patch("app.matching.ranking.score", side_effect=_slow_score):
            ranked = rank_candidates(make_profile("me"), pool, max_workers=3)

        assert [m.candidate_id for m in ranked] == ["best", "mid", "worst"]
