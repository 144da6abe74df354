#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from decimal import Decimal
from typing import Optional, Any
from datetime import datetime

from core.scorer.models import CandidateProfile, JobPosting, MatchResult
from .models.responses import CandidateSummary, JobSummary, MatchAnalysis


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()


def job_summary(job: JobPosting) -> JobSummary:
    return JobSummary(
        id=job.id,
        title=job.title,
        company=job.employer.name if job.employer else None,
        location=job.location,
        remote=job.remote,
        job_type=job.job_type,
        experience_level=job.experience_level.value if job.experience_level else None,
        skills_required=list(job.skills_required),
        salary_min=safe_float(job.salary_min),
        salary_max=safe_float(job.salary_max),
        created_at=safe_datetime_iso(job.created_at),
    )


def candidate_summary(candidate: CandidateProfile) -> CandidateSummary:
    return CandidateSummary(
        candidate_id=candidate.candidate_id,
        full_name=candidate.full_name,
        headline=candidate.headline,
        location=candidate.location,
        skills=list(candidate.skills),
        years_experience=candidate.years_experience,
        work_type=[wt.value for wt in candidate.work_type],
    )


def match_analysis(result: Optional[MatchResult]) -> Optional[MatchAnalysis]:
    if result is None:
        return None
    return MatchAnalysis(
        score=result.score,
        reasoning=result.reasoning,
        strengths=list(result.strengths),
        gaps=list(result.gaps),
        source=result.source,
    )
