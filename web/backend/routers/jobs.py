#!/usr/bin/env python3
"""
Job endpoints - rank candidates for a job.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from core.config_loader import RankingMode
from database.repository import MarketplaceRepository
from ..dependencies import get_app_context, get_repository
from ..services.candidate_matching_service import CandidateMatchingService
from ..models.responses import CandidateMatchesResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("/{job_id}/candidates", response_model=CandidateMatchesResponse)
async def get_job_candidates(
    job_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum candidates to return"),
    mode: Optional[RankingMode] = Query(default=None, description="Ranking mode: heuristic or ai"),
    repo: MarketplaceRepository = Depends(get_repository),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Rank visible candidates for a job, best match first.

    Results are stored in the matches table when persistence is enabled.
    """
    service = CandidateMatchingService(repo, ctx.ranking_pipeline, ctx.config.matching)
    return await service.rank_candidates(job_id, limit=limit, mode=mode)
