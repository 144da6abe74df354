from dataclasses import dataclass
from typing import Optional
import logging

from core.config_loader import AppConfig, LlmConfig
from core.llm.interfaces import LLMProvider
from core.llm.openai_service import OpenAIService
from core.ranking import RankingPipeline
from core.scorer.hybrid import HybridScorer, HybridScorerConfig

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Single source of truth for service instantiation. DB access should be
    obtained via marketplace_uow() per request, never held here.
    """
    config: AppConfig
    hybrid_scorer: HybridScorer
    ranking_pipeline: RankingPipeline
    llm_provider: Optional[LLMProvider] = None

    @classmethod
    def build(cls, config: AppConfig, llm_provider: Optional[LLMProvider] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            llm_provider: Explicit provider; when omitted one is built only if an API key is configured

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        if llm_provider is None:
            llm_provider = cls._build_llm_provider(config.llm)

        hybrid_scorer = HybridScorer(
            config=HybridScorerConfig.from_config(config.llm, config.matching.scorer),
            provider=llm_provider,
        )

        ranking_pipeline = RankingPipeline(
            hybrid_scorer,
            scorer_config=config.matching.scorer,
            ranking_config=config.matching.ranking,
        )

        return cls(
            config=config,
            hybrid_scorer=hybrid_scorer,
            ranking_pipeline=ranking_pipeline,
            llm_provider=llm_provider,
        )

    @staticmethod
    def _build_llm_provider(llm_config: LlmConfig) -> Optional[OpenAIService]:
        """Build OpenAI service from LLM configuration, or None when no API key is set."""
        if not llm_config.enabled:
            logger.warning("No LLM API key configured. Match analysis will use heuristic scoring.")
            return None

        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model=llm_config.match_model,
            temperature=llm_config.temperature,
            max_tokens=llm_config.max_tokens,
            timeout_seconds=llm_config.request_timeout_seconds,
        )
