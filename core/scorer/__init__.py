#!/usr/bin/env python3
"""
Scoring Module - candidate/job compatibility scoring.

Public API:
- calculate_compatibility: Heuristic four-factor score for one pair
- calculate_job_centric_score: Employer-side base score for one pair
- HybridScorer: LLM analysis with heuristic fallback
- CandidateProfile, JobPosting, MatchResult, ScoredJob, ScoredCandidate: Models

Modules:
- models.py: Data structures and ingress normalization
- skills.py: Fuzzy skill overlap
- compatibility.py: Compatibility score (skill, work type, recency, base)
- job_centric.py: Job-centric base score (skills, experience, location, salary)
- hybrid.py: HybridScorer orchestrator
"""

from core.scorer.models import (
    CandidateProfile,
    JobPosting,
    EmployerSummary,
    MatchResult,
    ScoredJob,
    ScoredCandidate,
    WorkType,
    ExperienceLevel,
)
from core.scorer.compatibility import calculate_compatibility, count_skill_matched_jobs
from core.scorer.job_centric import calculate_job_centric_score
from core.scorer.hybrid import HybridScorer, HybridScorerConfig, MatchAnalysisUnavailable

__all__ = [
    'CandidateProfile',
    'JobPosting',
    'EmployerSummary',
    'MatchResult',
    'ScoredJob',
    'ScoredCandidate',
    'WorkType',
    'ExperienceLevel',
    'calculate_compatibility',
    'count_skill_matched_jobs',
    'calculate_job_centric_score',
    'HybridScorer',
    'HybridScorerConfig',
    'MatchAnalysisUnavailable',
]
