#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field

from core.scorer.models import CandidateProfile, JobPosting


class AnalyzeMatchRequest(BaseModel):
    """Ad-hoc analysis of one candidate against one job.

    Both parts accept the same loosely-shaped records the database returns.
    """
    candidate: CandidateProfile = Field(..., description="Candidate profile")
    job: JobPosting = Field(..., description="Job posting")
