#!/usr/bin/env python3
"""
Recommendation service - dashboard job recommendations and candidate stats.
"""

import logging
from typing import Dict, List, Optional, Tuple

from fastapi.concurrency import run_in_threadpool

from core.config_loader import MatchingConfig, RankingMode
from core.ranking import RankingPipeline
from core.scorer.compatibility import count_skill_matched_jobs
from core.scorer.models import CandidateProfile, JobPosting, ScoredJob
from database.mappers import job_to_posting, profile_to_candidate
from database.models import ACTIVE_APPLICATION_STATUSES, Application
from database.repository import MarketplaceRepository
from ..exceptions import CandidateNotFoundException
from ..models.responses import (
    CandidateStats,
    RecommendationsResponse,
    RecommendedJob,
)
from ..utils import job_summary, match_analysis, safe_datetime_iso

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for candidate-facing job recommendations."""

    def __init__(self, repo: MarketplaceRepository, pipeline: RankingPipeline, config: MatchingConfig):
        self.repo = repo
        self.pipeline = pipeline
        self.config = config

    async def recommend_jobs(
        self,
        user_id: str,
        limit: Optional[int] = None,
        mode: Optional[RankingMode] = None
    ) -> RecommendationsResponse:
        """
        Recommend active jobs for a candidate.

        Without a candidate profile the most recent active jobs are returned
        unfiltered, each with the default score. Every result carries the
        candidate's application state for that job. Repository calls run in
        the threadpool; only ranking runs on the event loop.

        Raises:
            CandidateNotFoundException: No account exists for user_id.
        """
        limit = self.config.default_recommendation_limit if limit is None else limit
        mode = mode or self.config.default_mode

        candidate, jobs, applications = await run_in_threadpool(self._load_inputs, user_id, limit)
        has_profile = candidate is not None

        if not has_profile:
            default_score = self.config.default_score_without_profile
            scored = [ScoredJob(job=job, match_score=default_score) for job in jobs]
        else:
            scored = await self.pipeline.rank_jobs_for_candidate(candidate, jobs, limit, mode)

            if mode == RankingMode.AI and self.config.persist_matches:
                await run_in_threadpool(self._persist, user_id, scored)

        recommendations = [self._to_recommended(entry, applications) for entry in scored]
        logger.info(f"Recommended {len(recommendations)} jobs for {user_id} (mode={mode.value}, has_profile={has_profile})")

        return RecommendationsResponse(
            success=True,
            user_id=str(user_id),
            mode=mode.value,
            has_profile=has_profile,
            count=len(recommendations),
            recommendations=recommendations,
        )

    def _load_inputs(
        self,
        user_id: str,
        limit: int
    ) -> Tuple[Optional[CandidateProfile], List[JobPosting], Dict[str, Application]]:
        # Candidate is None when the account has no candidate record; jobs are then the most recent `limit`
        profile = self.repo.candidates.get_profile(user_id)
        if profile is None:
            raise CandidateNotFoundException(f"Candidate {user_id} not found")

        applications = self._applications_by_job(user_id)
        if profile.candidate_profile is None:
            recent = self.repo.jobs.get_active_jobs(limit=max(limit, 0))
            return None, [job_to_posting(job) for job in recent], applications

        jobs = self.repo.jobs.get_active_jobs(limit=self.config.job_pool_size)
        return profile_to_candidate(profile), [job_to_posting(job) for job in jobs], applications

    def candidate_stats(self, user_id: str) -> CandidateStats:
        """
        Dashboard counters for a candidate.

        Raises:
            CandidateNotFoundException: No account exists for user_id.
        """
        profile = self.repo.candidates.get_profile(user_id)
        if profile is None:
            raise CandidateNotFoundException(f"Candidate {user_id} not found")

        applications = self.repo.applications.get_for_candidate(user_id)
        active = sum(1 for a in applications if a.status in ACTIVE_APPLICATION_STATUSES)

        has_profile = profile.candidate_profile is not None
        skill_matched = 0
        if has_profile:
            candidate = profile_to_candidate(profile)
            jobs = [job_to_posting(job) for job in self.repo.jobs.get_active_jobs(limit=self.config.job_pool_size)]
            skill_matched = count_skill_matched_jobs(candidate, jobs)

        return CandidateStats(
            total_applications=len(applications),
            active_applications=active,
            skill_matched_jobs=skill_matched,
            has_profile=has_profile,
        )

    def _applications_by_job(self, user_id: str) -> Dict[str, Application]:
        # Applications arrive newest first; keep the latest per job
        by_job: Dict[str, Application] = {}
        for application in self.repo.applications.get_for_candidate(user_id):
            by_job.setdefault(str(application.job_id), application)
        return by_job

    @staticmethod
    def _to_recommended(entry: ScoredJob, applications: Dict[str, Application]) -> RecommendedJob:
        application = applications.get(entry.job.id)
        return RecommendedJob(
            job=job_summary(entry.job),
            match_score=entry.match_score,
            match_analysis=match_analysis(entry.match_analysis),
            application_id=str(application.id) if application else None,
            application_status=application.status if application else None,
            applied_at=safe_datetime_iso(application.created_at) if application else None,
            has_applied=application is not None,
        )

    def _persist(self, user_id: str, scored: List[ScoredJob]) -> None:
        rows = [
            {
                'job_id': entry.job.id,
                'candidate_id': user_id,
                'match_score': entry.match_score,
                'explanation': entry.match_analysis.reasoning if entry.match_analysis else None,
                'top_missing_skills': (entry.match_analysis.gaps if entry.match_analysis else [])[:5],
            }
            for entry in scored
        ]
        self.repo.matches.upsert_matches(rows)
