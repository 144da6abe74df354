#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MatchAnalysis(BaseModel):
    """Compatibility analysis for one candidate/job pair."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "score": 78,
                "reasoning": "Compatibility score based on skill overlap and work preferences. Key strengths identified.",
                "strengths": ["Matches 2/3 required skills", "Work preference aligns (remote)"],
                "gaps": ["Missing skills: Kubernetes"],
                "source": "heuristic"
            }
        }
    )

    score: int = Field(ge=0, le=100)
    reasoning: str
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    source: str = "heuristic"


class JobSummary(BaseModel):
    id: str
    title: str
    company: Optional[str] = None
    location: Optional[str] = None
    remote: bool = False
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    skills_required: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    created_at: Optional[str] = None


class CandidateSummary(BaseModel):
    candidate_id: Optional[str] = None
    full_name: Optional[str] = None
    headline: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    years_experience: Optional[int] = None
    work_type: List[str] = Field(default_factory=list)


class RecommendedJob(BaseModel):
    """A recommended job with the candidate's application state for it."""
    job: JobSummary
    match_score: int = Field(ge=0, le=100)
    match_analysis: Optional[MatchAnalysis] = None

    application_id: Optional[str] = None
    application_status: Optional[str] = None
    applied_at: Optional[str] = None
    has_applied: bool = False


class RecommendationsResponse(BaseModel):
    success: bool
    user_id: str
    mode: str
    has_profile: bool
    count: int
    recommendations: List[RecommendedJob]


class CandidateStats(BaseModel):
    total_applications: int = 0
    active_applications: int = 0
    skill_matched_jobs: int = 0
    has_profile: bool = False


class CandidateStatsResponse(BaseModel):
    success: bool
    user_id: str
    stats: CandidateStats


class RankedCandidate(BaseModel):
    """A candidate ranked for a job."""
    candidate: CandidateSummary
    match_score: int = Field(ge=0, le=100)
    explanation: str
    top_missing_skills: List[str] = Field(default_factory=list)
    match_analysis: Optional[MatchAnalysis] = None


class CandidateMatchesResponse(BaseModel):
    success: bool
    job_id: str
    mode: str
    total_processed: int
    count: int
    matches: List[RankedCandidate]


class ApplicationSummary(BaseModel):
    """An application joined with its candidate and job, scored for review."""
    application_id: str
    status: str
    applied_at: Optional[str] = None
    cover_letter: Optional[str] = None
    job: JobSummary
    candidate: CandidateSummary
    match_score: int = Field(ge=0, le=100)
    match_analysis: Optional[MatchAnalysis] = None


class ApplicationsResponse(BaseModel):
    success: bool
    employer_id: str
    count: int
    applications: List[ApplicationSummary]


class AnalyzeMatchResponse(BaseModel):
    success: bool
    analysis: MatchAnalysis
