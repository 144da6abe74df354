#!/usr/bin/env python3
"""
Matching endpoints - ad-hoc analysis of one candidate/job pair.
"""

import logging

from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_app_context
from ..models.requests import AnalyzeMatchRequest
from ..models.responses import AnalyzeMatchResponse
from ..utils import match_analysis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/match", tags=["matching"])


@router.post("/analyze", response_model=AnalyzeMatchResponse)
async def analyze_match(
    request: AnalyzeMatchRequest,
    ctx: AppContext = Depends(get_app_context)
):
    """
    Analyze a candidate against a job.

    Uses the LLM when configured and falls back to heuristic scoring otherwise.
    """
    result = await ctx.hybrid_scorer.analyze_match(request.candidate, request.job)
    return AnalyzeMatchResponse(success=True, analysis=match_analysis(result))
