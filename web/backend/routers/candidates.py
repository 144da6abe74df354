#!/usr/bin/env python3
"""
Candidate endpoints - dashboard recommendations and stats.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from core.config_loader import RankingMode
from database.repository import MarketplaceRepository
from ..dependencies import get_app_context, get_repository
from ..services.recommendation_service import RecommendationService
from ..models.responses import CandidateStatsResponse, RecommendationsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/candidates", tags=["candidates"])


@router.get("/{user_id}/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    user_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=50, description="Maximum jobs to return"),
    mode: Optional[RankingMode] = Query(default=None, description="Ranking mode: heuristic or ai"),
    repo: MarketplaceRepository = Depends(get_repository),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Get job recommendations for a candidate, best match first.

    Candidates without a profile get the most recent jobs instead.
    """
    service = RecommendationService(repo, ctx.ranking_pipeline, ctx.config.matching)
    return await service.recommend_jobs(user_id, limit=limit, mode=mode)


@router.get("/{user_id}/stats", response_model=CandidateStatsResponse)
def get_candidate_stats(
    user_id: str,
    repo: MarketplaceRepository = Depends(get_repository),
    ctx: AppContext = Depends(get_app_context)
):
    """Get dashboard counters for a candidate."""
    service = RecommendationService(repo, ctx.ranking_pipeline, ctx.config.matching)
    stats = service.candidate_stats(user_id)
    return CandidateStatsResponse(success=True, user_id=user_id, stats=stats)
