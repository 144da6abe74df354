#!/usr/bin/env python3
"""
Skill Overlap - fuzzy, case-insensitive skill matching.

Two skills match when either one is a substring of the other after
lower-casing, so "React" matches "react.js" and "Node" matches "Node.js".
"""

from typing import List, Sequence, Iterable


def skills_overlap(a: str, b: str) -> bool:
    a_key = a.lower()
    b_key = b.lower()
    return a_key in b_key or b_key in a_key


def matching_candidate_skills(candidate_skills: Sequence[str], required_skills: Sequence[str]) -> List[str]:
    """Candidate skills that match at least one required skill, in candidate order."""
    return [
        skill for skill in candidate_skills
        if any(skills_overlap(skill, required) for required in required_skills)
    ]


def covered_required_skills(candidate_skills: Sequence[str], required_skills: Sequence[str]) -> List[str]:
    """Required skills matched by at least one candidate skill, in job order."""
    return [
        required for required in required_skills
        if any(skills_overlap(skill, required) for skill in candidate_skills)
    ]


def missing_required_skills(candidate_skills: Sequence[str], required_skills: Sequence[str]) -> List[str]:
    """Required skills no candidate skill matches, in job order."""
    return [
        required for required in required_skills
        if not any(skills_overlap(skill, required) for skill in candidate_skills)
    ]


def has_any_overlap(candidate_skills: Iterable[str], required_skills: Sequence[str]) -> bool:
    return any(
        skills_overlap(skill, required)
        for skill in candidate_skills
        for required in required_skills
    )
