#!/usr/bin/env python3
"""
Hybrid Scorer - LLM match analysis with heuristic fallback.

analyze_match never raises: without a provider, or when the completion
fails in any way (transport, timeout, malformed JSON, invalid payload),
the heuristic compatibility result is returned instead.
"""

from datetime import datetime
from typing import Optional
import asyncio
import logging

from pydantic import BaseModel, Field, ValidationError

from core.config_loader import LlmConfig, ScorerConfig, ScoringWeights
from core.llm.interfaces import LLMProvider
from core.llm.prompt_builder import build_match_user_message
from core.llm.schema_models import MATCH_ANALYSIS_SCHEMA, MatchAnalysisPayload
from core.llm.system_prompts import MATCH_ANALYSIS_SYSTEM_PROMPT
from core.scorer.compatibility import calculate_compatibility
from core.scorer.models import CandidateProfile, JobPosting, MatchResult

logger = logging.getLogger(__name__)


class MatchAnalysisUnavailable(Exception):
    """The completion service could not produce a usable analysis."""


class HybridScorerConfig(BaseModel):
    fallback_weights: ScoringWeights = Field(default_factory=ScoringWeights)
    request_timeout_seconds: float = 30.0
    bio_max_chars: int = 500
    description_max_chars: int = 1500

    @classmethod
    def from_config(cls, llm: LlmConfig, scorer: ScorerConfig) -> "HybridScorerConfig":
        return cls(
            fallback_weights=scorer.analysis,
            request_timeout_seconds=llm.request_timeout_seconds,
            bio_max_chars=llm.bio_max_chars,
            description_max_chars=llm.description_max_chars,
        )


class HybridScorer:
    def __init__(self, config: Optional[HybridScorerConfig] = None, provider: Optional[LLMProvider] = None):
        self.config = config or HybridScorerConfig()
        self.provider = provider

    @property
    def ai_enabled(self) -> bool:
        return self.provider is not None

    def heuristic(self, candidate: CandidateProfile, job: JobPosting, now: Optional[datetime] = None) -> MatchResult:
        return calculate_compatibility(candidate, job, self.config.fallback_weights, now=now)

    async def analyze_match(self, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        """Score a pair with the LLM when available, otherwise heuristically."""
        if self.provider is None:
            return self.heuristic(candidate, job)

        try:
            return await self._analyze_with_llm(candidate, job)
        except MatchAnalysisUnavailable as e:
            logger.warning(f"Match analysis for job {job.id} fell back to heuristic scoring: {e}")
            return self.heuristic(candidate, job)

    async def _analyze_with_llm(self, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        user_message = build_match_user_message(
            candidate,
            job,
            bio_max_chars=self.config.bio_max_chars,
            description_max_chars=self.config.description_max_chars,
        )

        try:
            raw = await asyncio.wait_for(
                self.provider.complete_structured(
                    MATCH_ANALYSIS_SYSTEM_PROMPT,
                    user_message,
                    MATCH_ANALYSIS_SCHEMA,
                ),
                timeout=self.config.request_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise MatchAnalysisUnavailable(
                f"completion timed out after {self.config.request_timeout_seconds}s"
            ) from e
        except Exception as e:
            raise MatchAnalysisUnavailable(f"completion failed: {type(e).__name__}: {e}") from e

        try:
            payload = MatchAnalysisPayload.model_validate(raw)
        except ValidationError as e:
            raise MatchAnalysisUnavailable(f"invalid analysis payload: {e.error_count()} validation error(s)") from e

        logger.debug(f"AI match score {payload.rounded_score} for job {job.id}")
        return MatchResult(
            score=payload.rounded_score,
            reasoning=payload.reasoning,
            strengths=payload.strengths,
            gaps=payload.gaps,
            source="ai",
        )
