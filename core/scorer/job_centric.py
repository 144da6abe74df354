#!/usr/bin/env python3
"""
Job-centric Base Score - employer-side candidate pre-filter.

Starts from a neutral midpoint and applies adjustments:
- skills: share of required skills the candidate covers, re-centred so
  half coverage is neutral
- experience: bonus/penalty by the job's experience level
- location: remote-compatible or same-place bonus, mismatch penalty
- salary: midpoint proximity bonus, large gap penalty
"""

from typing import Optional
import logging

from core.config_loader import JobCentricWeights
from core.scorer.compatibility import clamp_score
from core.scorer.models import CandidateProfile, JobPosting, ExperienceLevel, WorkType
from core.scorer.skills import covered_required_skills

logger = logging.getLogger(__name__)


def experience_adjustment(level: Optional[ExperienceLevel], years: Optional[int]) -> float:
    years = years or 0

    if level == ExperienceLevel.ENTRY:
        if years <= 2:
            return 15
        return 5 if years <= 5 else -10

    if level == ExperienceLevel.MID:
        if 2 <= years <= 7:
            return 15
        return -10 if years < 2 else -5

    if level == ExperienceLevel.SENIOR:
        if years >= 5:
            return 15
        return 5 if years >= 3 else -15

    if level in (ExperienceLevel.LEAD, ExperienceLevel.EXECUTIVE):
        if years >= 8:
            return 15
        return 0 if years >= 5 else -15

    return 0


def location_adjustment(job: JobPosting, candidate: CandidateProfile, weights: JobCentricWeights) -> float:
    if job.remote or WorkType.REMOTE in candidate.work_type:
        return weights.location_match_bonus

    if not job.location or not candidate.location:
        return 0.0

    job_loc = job.location.lower()
    cand_loc = candidate.location.lower()
    if job_loc in cand_loc or cand_loc in job_loc:
        return weights.location_match_bonus
    return -weights.location_mismatch_penalty


def salary_adjustment(job: JobPosting, candidate: CandidateProfile, weights: JobCentricWeights) -> float:
    # Zero bounds are treated as not provided
    if not (job.salary_min and job.salary_max and candidate.salary_min and candidate.salary_max):
        return 0.0

    job_mid = (job.salary_min + job.salary_max) / 2
    candidate_mid = (candidate.salary_min + candidate.salary_max) / 2
    if job_mid <= 0:
        return 0.0

    diff = abs(job_mid - candidate_mid) / job_mid
    if diff <= weights.salary_close_ratio:
        return weights.salary_close_bonus
    if diff <= weights.salary_far_ratio:
        return 0.0
    return -weights.salary_far_penalty


def calculate_job_centric_score(
    job: JobPosting,
    candidate: CandidateProfile,
    weights: Optional[JobCentricWeights] = None
) -> int:
    """Base score of a candidate for a job, clamped to [0, 100]."""
    weights = weights or JobCentricWeights()
    score = weights.start

    required = job.skills_required
    if required:
        covered = covered_required_skills(candidate.skills, required)
        score += (len(covered) / len(required)) * weights.skill - weights.skill_baseline_adjustment

    score += experience_adjustment(job.experience_level, candidate.years_experience)
    score += location_adjustment(job, candidate, weights)
    score += salary_adjustment(job, candidate, weights)

    result = clamp_score(score)
    logger.debug("Job-centric score %d for candidate %s on job %s", result, candidate.candidate_id, job.id)
    return result
