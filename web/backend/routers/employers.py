#!/usr/bin/env python3
"""
Employer endpoints - review received applications.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from database.repository import MarketplaceRepository
from ..dependencies import get_app_context, get_repository
from ..services.application_service import ApplicationService
from ..models.responses import ApplicationsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employers", tags=["employers"])


@router.get("/{employer_id}/applications", response_model=ApplicationsResponse)
def get_employer_applications(
    employer_id: str,
    job_id: Optional[str] = Query(default=None, description="Restrict to one job"),
    status: Optional[str] = Query(default=None, description="Restrict to one application status"),
    sort: str = Query(default="score", pattern="^(score|date)$", description="Sort by score or date"),
    repo: MarketplaceRepository = Depends(get_repository),
    ctx: AppContext = Depends(get_app_context)
):
    """
    List applications to an employer's jobs with a compatibility score for each.
    """
    service = ApplicationService(repo, ctx.config.matching.scorer.analysis)
    applications = service.list_applications(employer_id, job_id=job_id, status=status, sort=sort)
    return ApplicationsResponse(
        success=True,
        employer_id=employer_id,
        count=len(applications),
        applications=applications
    )
