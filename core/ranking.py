#!/usr/bin/env python3
"""
Ranking Pipeline - scores, filters, sorts and truncates match sets.

Two directions:
- rank_jobs_for_candidate: dashboard recommendations
- rank_candidates_for_job: employer-side candidate ranking

Each call scores every pair, keeps entries strictly above the mode's
threshold, stable-sorts by score descending (ties keep input order) and
returns at most `limit` entries. AI mode sends pairs to the HybridScorer
in fixed-size concurrent batches separated by a short pause.
"""

from datetime import datetime
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar
import asyncio
import logging

from core.config_loader import RankingConfig, RankingMode, ScorerConfig
from core.scorer.compatibility import calculate_compatibility
from core.scorer.hybrid import HybridScorer
from core.scorer.job_centric import calculate_job_centric_score
from core.scorer.models import (
    CandidateProfile,
    JobPosting,
    ScoredCandidate,
    ScoredJob,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", ScoredJob, ScoredCandidate)


def select_top(scored: Sequence[R], min_score: int, limit: int) -> List[R]:
    """Keep scores strictly above min_score, stable-sort descending, truncate."""
    if limit <= 0:
        return []
    kept = [item for item in scored if item.match_score > min_score]
    return sorted(kept, key=lambda item: item.match_score, reverse=True)[:limit]


class RankingPipeline:
    """
    Ranks jobs for a candidate or candidates for a job.

    Never raises for an empty result; returns [] instead.
    """

    def __init__(
        self,
        hybrid_scorer: HybridScorer,
        scorer_config: Optional[ScorerConfig] = None,
        ranking_config: Optional[RankingConfig] = None
    ):
        self.hybrid = hybrid_scorer
        self.scorer_config = scorer_config or ScorerConfig()
        self.config = ranking_config or RankingConfig()

    async def rank_jobs_for_candidate(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        limit: int,
        mode: RankingMode = RankingMode.HEURISTIC,
        now: Optional[datetime] = None
    ) -> List[ScoredJob]:
        if limit <= 0 or not jobs:
            return []

        if mode == RankingMode.AI:
            scored = await self._score_jobs_with_ai(candidate, jobs, limit)
            min_score = self.config.ai_min_score
        else:
            weights = self.scorer_config.recommendation
            scored = []
            for job in jobs:
                analysis = calculate_compatibility(candidate, job, weights, now=now)
                scored.append(ScoredJob(job=job, match_score=analysis.score, match_analysis=analysis))
            min_score = self.config.heuristic_min_score

        ranked = select_top(scored, min_score, limit)
        logger.info(
            f"Ranked {len(jobs)} jobs for candidate {candidate.candidate_id} "
            f"({mode.value}): scored={len(scored)}, returned={len(ranked)}"
        )
        return ranked

    async def rank_candidates_for_job(
        self,
        job: JobPosting,
        candidates: Sequence[CandidateProfile],
        limit: int,
        mode: RankingMode = RankingMode.HEURISTIC
    ) -> List[ScoredCandidate]:
        if limit <= 0 or not candidates:
            return []

        weights = self.scorer_config.job_centric
        base_scored = [
            ScoredCandidate(
                candidate=candidate,
                match_score=calculate_job_centric_score(job, candidate, weights),
            )
            for candidate in candidates
        ]
        min_score = self.config.candidate_min_score

        if mode == RankingMode.AI:
            pool_size = min(self.config.ai_rerank_pool, limit)
            shortlist = select_top(base_scored, min_score, pool_size)
            scored = await self._run_batches(
                shortlist,
                lambda entry: self._analyze_candidate(entry.candidate, job),
            )
        else:
            scored = base_scored

        ranked = select_top(scored, min_score, limit)
        logger.info(
            f"Ranked {len(candidates)} candidates for job {job.id} "
            f"({mode.value}): scored={len(scored)}, returned={len(ranked)}"
        )
        return ranked

    async def _score_jobs_with_ai(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        limit: int
    ) -> List[ScoredJob]:
        factor = self.config.ai_pool_factor
        stop_after = limit * factor if factor else None
        return await self._run_batches(
            jobs,
            lambda job: self._analyze_job(candidate, job),
            stop_after=stop_after,
        )

    async def _analyze_job(self, candidate: CandidateProfile, job: JobPosting) -> ScoredJob:
        analysis = await self.hybrid.analyze_match(candidate, job)
        return ScoredJob(job=job, match_score=analysis.score, match_analysis=analysis)

    async def _analyze_candidate(self, candidate: CandidateProfile, job: JobPosting) -> ScoredCandidate:
        analysis = await self.hybrid.analyze_match(candidate, job)
        return ScoredCandidate(candidate=candidate, match_score=analysis.score, match_analysis=analysis)

    async def _pause(self) -> None:
        if self.config.batch_pause_seconds > 0:
            await asyncio.sleep(self.config.batch_pause_seconds)

    async def _run_batches(
        self,
        items: Sequence[T],
        score: Callable[[T], Awaitable[R]],
        stop_after: Optional[int] = None
    ) -> List[R]:
        """Score items batch_size at a time, pausing between batches.

        Every item in a batch is awaited before the next batch starts. An
        item that raises is logged and contributes nothing; its siblings
        keep their results. Once stop_after results are collected no
        further batch is launched.
        """
        batch_size = self.config.batch_size
        results: List[R] = []

        for start in range(0, len(items), batch_size):
            if stop_after is not None and len(results) >= stop_after:
                break

            if start > 0:
                await self._pause()

            batch = items[start:start + batch_size]
            outcomes = await asyncio.gather(*(score(item) for item in batch), return_exceptions=True)
            for offset, outcome in enumerate(outcomes):
                if isinstance(outcome, BaseException):
                    logger.error(f"Scoring item {start + offset} in batch {start // batch_size + 1} failed, skipping: {outcome!r}")
                    continue
                results.append(outcome)

        return results
