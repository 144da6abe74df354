"""
Ingress mappers: ORM rows -> scorer models.

Scorer models do the normalization (null arrays, unknown enum values,
naive timestamps); these functions only pick the columns.
"""
from typing import Any, Dict, Optional

from core.scorer.models import CandidateProfile, JobPosting
from database.models import CandidateProfileRecord, Employer, Job, Profile


def _non_negative(value: Optional[int]) -> Optional[int]:
    return max(0, value) if value is not None else None


def employer_to_dict(employer: Optional[Employer]) -> Optional[Dict[str, Any]]:
    if employer is None:
        return None
    return {"name": employer.name, "description": employer.description}


def job_to_posting(job: Job) -> JobPosting:
    return JobPosting.model_validate({
        "id": job.id,
        "title": job.title,
        "description": job.description,
        "skills_required": job.skills_required,
        "remote": job.remote,
        "location": job.location,
        "job_type": job.job_type,
        "experience_level": job.experience_level,
        "salary_min": job.salary_min,
        "salary_max": job.salary_max,
        "created_at": job.created_at,
        "employer": employer_to_dict(job.employer),
    })


def profile_to_candidate(profile: Profile, record: Optional[CandidateProfileRecord] = None) -> CandidateProfile:
    """Combine the account profile and candidate record into one scoring input.

    The candidate record is optional; without it only identity and display
    fields are set and every scored attribute is empty.
    """
    if record is None:
        record = profile.candidate_profile

    data: Dict[str, Any] = {
        "candidate_id": profile.id,
        "full_name": profile.full_name,
        "headline": profile.headline,
        "location": profile.location,
        "bio": profile.about,
    }
    if record is not None:
        data.update({
            "skills": record.skills,
            "years_experience": _non_negative(record.years_experience),
            "work_type": record.work_type,
            "salary_min": record.salary_min,
            "salary_max": record.salary_max,
            "bio": record.bio or profile.about,
        })
    return CandidateProfile.model_validate(data)
