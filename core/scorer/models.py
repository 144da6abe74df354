#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring inputs and results.

CandidateProfile and JobPosting accept the loosely-typed rows the
persistence backend returns (related records as one-element lists,
null arrays, ISO timestamp strings, alternate column names) and
normalize them once, at construction time. Everything downstream
sees a single canonical shape.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Dict, Any, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator


class WorkType(str, Enum):
    ONSITE = "onsite"
    REMOTE = "remote"
    HYBRID = "hybrid"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


def normalize_skill_list(value: Any) -> List[str]:
    """Coerce a raw skills value into a de-duplicated list of non-empty strings.

    Accepts None, a comma-separated string, or any iterable of values.
    Duplicates are detected case-insensitively; the first spelling wins.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")

    seen = set()
    skills: List[str] = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        key = text.lower()
        if not text or key in seen:
            continue
        seen.add(key)
        skills.append(text)
    return skills


def _first_related(value: Any) -> Any:
    # Joined relations may arrive as a single record or a list of one
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class _ScoringInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class EmployerSummary(_ScoringInput):
    name: str = ""
    description: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, v):
        return v or ""


class CandidateProfile(_ScoringInput):
    """Candidate attributes used for scoring. Identity is carried but never scored."""
    candidate_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("candidate_id", "user_id", "id"))
    full_name: Optional[str] = None
    headline: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = Field(default=None, validation_alias=AliasChoices("bio", "about"))

    skills: List[str] = Field(default_factory=list)
    years_experience: Optional[int] = Field(default=None, ge=0)
    work_type: List[WorkType] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None

    @field_validator("candidate_id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v) if v is not None else None

    @field_validator("skills", mode="before")
    @classmethod
    def _normalize_skills(cls, v):
        return normalize_skill_list(v)

    @field_validator("work_type", mode="before")
    @classmethod
    def _normalize_work_type(cls, v):
        if v is None:
            return []
        if isinstance(v, (str, WorkType)):
            v = [v]

        allowed = {wt.value for wt in WorkType}
        result: List[str] = []
        for item in v:
            raw = item.value if isinstance(item, WorkType) else str(item)
            key = raw.strip().lower().replace("-", "").replace(" ", "")
            if key in allowed and key not in result:
                result.append(key)
        return result


class JobPosting(_ScoringInput):
    id: str
    title: str = ""
    description: str = ""
    skills_required: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("skills_required", "skills"),
    )
    remote: bool = False
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    created_at: Optional[datetime] = None
    employer: Optional[EmployerSummary] = Field(
        default=None,
        validation_alias=AliasChoices("employer", "employers"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return str(v)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _text_or_empty(cls, v):
        return v or ""

    @field_validator("remote", mode="before")
    @classmethod
    def _remote_flag(cls, v):
        return bool(v)

    @field_validator("skills_required", mode="before")
    @classmethod
    def _normalize_skills(cls, v):
        return normalize_skill_list(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def _known_level(cls, v):
        if v is None or isinstance(v, ExperienceLevel):
            return v
        key = str(v).strip().lower()
        return key if key in {lvl.value for lvl in ExperienceLevel} else None

    @field_validator("employer", mode="before")
    @classmethod
    def _single_employer(cls, v):
        return _first_related(v)

    @field_validator("created_at", mode="after")
    @classmethod
    def _assume_utc(cls, v):
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MatchResult(BaseModel):
    """Compatibility analysis for one candidate/job pair."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    reasoning: str
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    source: Literal["heuristic", "ai"] = "heuristic"
    components: Dict[str, float] = Field(default_factory=dict)


class ScoredJob(BaseModel):
    """A job posting with its match score for one candidate."""
    model_config = ConfigDict(frozen=True)

    job: JobPosting
    match_score: int = Field(ge=0, le=100)
    match_analysis: Optional[MatchResult] = None


class ScoredCandidate(BaseModel):
    """A candidate with their match score for one job."""
    model_config = ConfigDict(frozen=True)

    candidate: CandidateProfile
    match_score: int = Field(ge=0, le=100)
    match_analysis: Optional[MatchResult] = None
