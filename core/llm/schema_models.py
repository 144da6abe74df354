"""
Schema Models - JSON schemas for structured completions and the pydantic
models that validate what comes back.

The JSON schema constrains the model server-side; the pydantic model is the
gate every payload must pass before it is trusted.
"""
import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


MATCH_ANALYSIS_SCHEMA = {
    "name": "match_analysis",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "score": {
                "type": "number",
                "description": "Compatibility score between 0 and 100",
            },
            "reasoning": {
                "type": "string",
                "description": "2-3 sentence explanation of the match quality",
            },
            "strengths": {
                "type": "array",
                "items": {"type": "string"},
            },
            "gaps": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
        "required": ["score", "reasoning", "strengths", "gaps"],
        "additionalProperties": False,
    },
}

DEFAULT_REASONING = "No reasoning provided"


class MatchAnalysisPayload(BaseModel):
    """Validated match-analysis response from the completion service."""
    model_config = ConfigDict(extra="ignore")

    score: float = Field(strict=True, ge=0, le=100, allow_inf_nan=False)
    reasoning: Optional[str] = None
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)

    @field_validator("score", mode="before")
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        # bool is an int subclass; a true/false score is malformed
        if isinstance(v, bool):
            raise ValueError("score must be a number, not a boolean")
        return v

    @field_validator("reasoning", mode="after")
    @classmethod
    def _default_reasoning(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            return DEFAULT_REASONING
        return v

    @field_validator("strengths", "gaps", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def rounded_score(self) -> int:
        return int(math.floor(self.score + 0.5))
