#!/usr/bin/env python3
"""
Candidate matching service - rank visible candidates for an employer's job.
"""

import logging
from typing import List, Optional, Tuple

from fastapi.concurrency import run_in_threadpool

from core.config_loader import MatchingConfig, RankingMode
from core.ranking import RankingPipeline
from core.scorer.models import CandidateProfile, JobPosting, ScoredCandidate
from core.scorer.skills import missing_required_skills
from database.mappers import job_to_posting, profile_to_candidate
from database.repository import MarketplaceRepository
from ..exceptions import JobNotFoundException
from ..models.responses import CandidateMatchesResponse, RankedCandidate
from ..utils import candidate_summary, match_analysis

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "Match score calculated based on skills, experience, and job requirements."
MAX_MISSING_SKILLS = 5


class CandidateMatchingService:
    """Service for employer-side candidate ranking."""

    def __init__(self, repo: MarketplaceRepository, pipeline: RankingPipeline, config: MatchingConfig):
        self.repo = repo
        self.pipeline = pipeline
        self.config = config

    async def rank_candidates(
        self,
        job_id: str,
        limit: Optional[int] = None,
        mode: Optional[RankingMode] = None
    ) -> CandidateMatchesResponse:
        """
        Rank visible candidates for a job and optionally store the results.

        Loading and storing run in the threadpool; ranking runs on the event loop.

        Raises:
            JobNotFoundException: The job does not exist.
        """
        limit = self.config.default_candidate_limit if limit is None else limit
        mode = mode or self.config.default_mode

        posting, candidates = await run_in_threadpool(self._load_inputs, job_id)

        ranked = await self.pipeline.rank_candidates_for_job(posting, candidates, limit, mode)
        matches = [self._to_ranked(posting, entry) for entry in ranked]

        if self.config.persist_matches and matches:
            await run_in_threadpool(self._persist, posting.id, matches)

        return CandidateMatchesResponse(
            success=True,
            job_id=posting.id,
            mode=mode.value,
            total_processed=len(candidates),
            count=len(matches),
            matches=matches,
        )

    def _load_inputs(self, job_id: str) -> Tuple[JobPosting, List[CandidateProfile]]:
        job = self.repo.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundException(f"Job {job_id} not found")

        profiles = self.repo.candidates.get_visible_candidates(limit=self.config.candidate_pool_size)
        return job_to_posting(job), [profile_to_candidate(p) for p in profiles]

    @staticmethod
    def _to_ranked(job: JobPosting, entry: ScoredCandidate) -> RankedCandidate:
        analysis = entry.match_analysis
        if analysis is not None:
            explanation = analysis.reasoning
            missing = list(analysis.gaps)
        else:
            explanation = DEFAULT_EXPLANATION
            missing = missing_required_skills(entry.candidate.skills, job.skills_required)

        return RankedCandidate(
            candidate=candidate_summary(entry.candidate),
            match_score=entry.match_score,
            explanation=explanation,
            top_missing_skills=missing[:MAX_MISSING_SKILLS],
            match_analysis=match_analysis(analysis),
        )

    def _persist(self, job_id: str, matches: List[RankedCandidate]) -> None:
        rows = [
            {
                'job_id': job_id,
                'candidate_id': m.candidate.candidate_id,
                'match_score': m.match_score,
                'explanation': m.explanation,
                'top_missing_skills': m.top_missing_skills,
            }
            for m in matches
            if m.candidate.candidate_id
        ]
        stored = self.repo.matches.upsert_matches(rows)
        logger.info(f"Stored {stored} candidate matches for job {job_id}")
