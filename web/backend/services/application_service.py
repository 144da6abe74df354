#!/usr/bin/env python3
"""
Application service - employer review of received applications.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from core.config_loader import ScoringWeights
from core.scorer.compatibility import calculate_compatibility
from database.mappers import job_to_posting, profile_to_candidate
from database.repository import MarketplaceRepository
from ..exceptions import EmployerNotFoundException, InvalidRequestException, JobNotFoundException
from ..models.responses import ApplicationSummary
from ..utils import candidate_summary, job_summary, match_analysis, safe_datetime_iso

logger = logging.getLogger(__name__)

SORT_BY_SCORE = "score"
SORT_BY_DATE = "date"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class ApplicationService:
    """Service for listing and scoring an employer's applications."""

    def __init__(self, repo: MarketplaceRepository, weights: ScoringWeights):
        self.repo = repo
        self.weights = weights

    def list_applications(
        self,
        employer_id: str,
        job_id: Optional[str] = None,
        status: Optional[str] = None,
        sort: str = SORT_BY_SCORE
    ) -> List[ApplicationSummary]:
        """
        List applications to an employer's jobs, each scored against its job.

        Args:
            employer_id: Employer whose jobs to include.
            job_id: Restrict to one of the employer's jobs.
            status: Restrict to one application status.
            sort: "score" (highest first) or "date" (newest first).

        Raises:
            EmployerNotFoundException: The employer does not exist.
            JobNotFoundException: job_id is not one of the employer's jobs.
            InvalidRequestException: Unknown sort key.
        """
        if sort not in (SORT_BY_SCORE, SORT_BY_DATE):
            raise InvalidRequestException(f"Unknown sort '{sort}'; expected '{SORT_BY_SCORE}' or '{SORT_BY_DATE}'")

        if self.repo.employers.get_by_id(employer_id) is None:
            raise EmployerNotFoundException(f"Employer {employer_id} not found")

        jobs = self.repo.jobs.get_by_employer(employer_id, job_id=job_id)
        if job_id is not None and not jobs:
            raise JobNotFoundException(f"Job {job_id} not found for employer {employer_id}")

        applications = self.repo.applications.get_for_jobs([job.id for job in jobs], status=status)

        summaries = []
        for application in applications:
            if application.candidate is None or application.job is None:
                logger.warning(f"Skipping application {application.id} with missing candidate or job record")
                continue

            candidate = profile_to_candidate(application.candidate)
            posting = job_to_posting(application.job)
            result = calculate_compatibility(candidate, posting, self.weights)

            summaries.append((application.created_at, ApplicationSummary(
                application_id=str(application.id),
                status=application.status,
                applied_at=safe_datetime_iso(application.created_at),
                cover_letter=application.cover_letter,
                job=job_summary(posting),
                candidate=candidate_summary(candidate),
                match_score=result.score,
                match_analysis=match_analysis(result),
            )))

        if sort == SORT_BY_DATE:
            summaries.sort(key=lambda pair: pair[0] or _EPOCH, reverse=True)
        else:
            summaries.sort(key=lambda pair: pair[1].match_score, reverse=True)

        logger.info(f"Listed {len(summaries)} applications for employer {employer_id}")
        return [summary for _, summary in summaries]
