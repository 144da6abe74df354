"""
Prompt Builder - serializes a candidate/job pair into the match-analysis user message.

The message is JSON so that profile text (bio, job description) can never be
mistaken for instructions or break the message structure.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from core.scorer.models import CandidateProfile, JobPosting


def truncate_text(text: Optional[str], max_chars: int) -> Optional[str]:
    if text is None:
        return None
    if max_chars <= 0:
        return ""
    return text[:max_chars]


def _salary_range(salary_min: Optional[float], salary_max: Optional[float]) -> Optional[str]:
    if not salary_min or not salary_max:
        return None
    return f"{salary_min:,.0f} - {salary_max:,.0f}"


def candidate_summary(candidate: CandidateProfile, bio_max_chars: int) -> Dict[str, Any]:
    return {
        "name": candidate.full_name,
        "headline": candidate.headline,
        "skills": list(candidate.skills),
        "years_experience": candidate.years_experience,
        "work_type": [wt.value for wt in candidate.work_type],
        "location": candidate.location,
        "salary_range": _salary_range(candidate.salary_min, candidate.salary_max),
        "bio": truncate_text(candidate.bio, bio_max_chars),
    }


def job_summary(job: JobPosting, description_max_chars: int) -> Dict[str, Any]:
    return {
        "title": job.title,
        "company": job.employer.name if job.employer else None,
        "location": job.location,
        "remote": job.remote,
        "job_type": job.job_type,
        "experience_level": job.experience_level.value if job.experience_level else None,
        "required_skills": list(job.skills_required),
        "salary_range": _salary_range(job.salary_min, job.salary_max),
        "description": truncate_text(job.description, description_max_chars),
    }


def build_match_user_message(
    candidate: CandidateProfile,
    job: JobPosting,
    bio_max_chars: int = 500,
    description_max_chars: int = 1500
) -> str:
    payload = {
        "candidate": candidate_summary(candidate, bio_max_chars),
        "job": job_summary(job, description_max_chars),
    }
    return (
        "Analyze the compatibility between this candidate and job posting.\n\n"
        + json.dumps(payload, ensure_ascii=False, indent=2)
    )
