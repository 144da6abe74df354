#!/usr/bin/env python3
"""
Compatibility Score - heuristic candidate/job scoring.

score = skill + work_type + recency + base, each factor computed
independently, then clamped to [0, 100] and rounded.

- Skill: matched candidate skills / required skills * weight. A job with
  no required skills contributes 0 rather than full credit. The score
  counts candidate skills, so several candidate skills matching one
  requirement each add credit; the "Matches N/M" strength and the
  "Missing skills" gap instead report which required skills are covered.
- Work type: full weight when the candidate accepts the job's implied
  work type (remote/onsite) or accepts hybrid. No preference, no signal.
- Recency: weight - days_since_posted * decay, floored at 0. Only used by
  schemes with a recency weight.
- Base: flat constant so every pairing keeps a minimal score.

Missing optional inputs are zero-signal for their factor, never errors.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Any, List, Optional, Sequence, Tuple
import logging
import math

from core.config_loader import ScoringWeights
from core.scorer.models import CandidateProfile, JobPosting, MatchResult, WorkType
from core.scorer.skills import (
    matching_candidate_skills,
    covered_required_skills,
    missing_required_skills,
    has_any_overlap,
)

logger = logging.getLogger(__name__)

MAX_LISTED_MISSING_SKILLS = 5
SECONDS_PER_DAY = 24 * 60 * 60


def clamp_score(raw: float) -> int:
    """Clamp to [0, 100] and round half up to a whole number."""
    return int(math.floor(max(0.0, min(100.0, raw)) + 0.5))


def implied_work_type(job: JobPosting) -> WorkType:
    return WorkType.REMOTE if job.remote else WorkType.ONSITE


def days_since_posted(created_at: Optional[datetime], now: Optional[datetime] = None) -> Optional[int]:
    """Whole days since posting; None when the posting date is unknown. Future dates count as 0."""
    if created_at is None:
        return None
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = (now - created_at).total_seconds()
    return max(0, math.floor(elapsed / SECONDS_PER_DAY))


def skill_component(candidate: CandidateProfile, job: JobPosting, weight: float) -> Tuple[float, Dict[str, Any]]:
    required = job.skills_required
    if not required or not candidate.skills:
        return 0.0, {"matched": [], "covered": [], "missing": list(required)}

    matched = matching_candidate_skills(candidate.skills, required)
    value = (len(matched) / len(required)) * weight
    return value, {
        "matched": matched,
        "covered": covered_required_skills(candidate.skills, required),
        "missing": missing_required_skills(candidate.skills, required),
    }


def work_type_component(candidate: CandidateProfile, job: JobPosting, weight: float) -> Optional[float]:
    """Work-type points, or None when the candidate recorded no preference."""
    if not candidate.work_type:
        return None
    job_type = implied_work_type(job)
    if job_type in candidate.work_type or WorkType.HYBRID in candidate.work_type:
        return weight
    return 0.0


def recency_component(job: JobPosting, weight: float, decay_per_day: float, now: Optional[datetime] = None) -> float:
    if weight <= 0:
        return 0.0
    days = days_since_posted(job.created_at, now)
    if days is None:
        return 0.0
    return max(0.0, weight - days * decay_per_day)


def _reasoning(uses_recency: bool, strengths: List[str], gaps: List[str]) -> str:
    basis = "skill overlap, work preferences and posting recency" if uses_recency else "skill overlap and work preferences"
    parts = [f"Compatibility score based on {basis}."]
    if strengths:
        parts.append("Key strengths identified.")
    if gaps:
        parts.append("Some areas for consideration.")
    return " ".join(parts)


def calculate_compatibility(
    candidate: CandidateProfile,
    job: JobPosting,
    weights: ScoringWeights,
    now: Optional[datetime] = None
) -> MatchResult:
    """Score one candidate against one job using a weight scheme.

    Args:
        candidate: Candidate profile
        job: Job posting
        weights: Weight scheme for this call site
        now: Reference time for the recency factor (defaults to current UTC time)

    Returns:
        MatchResult with heuristic strengths/gaps and a per-factor breakdown
    """
    strengths: List[str] = []
    gaps: List[str] = []

    skill_points, skill_detail = skill_component(candidate, job, weights.skill)
    required_count = len(job.skills_required)
    covered = skill_detail["covered"]
    if covered:
        strengths.append(f"Matches {len(covered)}/{required_count} required skills")
    elif required_count:
        gaps.append("Limited skill alignment with job requirements")

    missing = skill_detail["missing"]
    if covered and missing:
        gaps.append("Missing skills: " + ", ".join(missing[:MAX_LISTED_MISSING_SKILLS]))

    work_points = work_type_component(candidate, job, weights.work_type)
    if work_points is not None:
        if work_points > 0:
            strengths.append(f"Work preference aligns ({implied_work_type(job).value})")
        else:
            gaps.append("Work location preference mismatch")

    uses_recency = weights.recency > 0
    recency_points = recency_component(job, weights.recency, weights.recency_decay_per_day, now)
    if recency_points > 0:
        strengths.append("Recently posted")

    raw_score = skill_points + (work_points or 0.0) + recency_points + weights.base
    score = clamp_score(raw_score)

    components = {
        "skill": skill_points,
        "work_type": work_points or 0.0,
        "recency": recency_points,
        "base": weights.base,
        "raw_score": raw_score,
        "matched_skill_count": float(len(skill_detail["matched"])),
        "required_skill_count": float(required_count),
    }

    logger.debug(
        "Compatibility %d for job %s (skill=%.1f, work=%.1f, recency=%.1f, base=%.1f)",
        score, job.id, skill_points, work_points or 0.0, recency_points, weights.base
    )

    return MatchResult(
        score=score,
        reasoning=_reasoning(uses_recency, strengths, gaps),
        strengths=strengths,
        gaps=gaps,
        source="heuristic",
        components=components,
    )


def count_skill_matched_jobs(candidate: CandidateProfile, jobs: Sequence[JobPosting]) -> int:
    """Number of jobs sharing at least one fuzzy skill match with the candidate."""
    if not candidate.skills:
        return 0
    return sum(1 for job in jobs if has_any_overlap(candidate.skills, job.skills_required))
