import logging
from typing import Any, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import Application, Job, Profile
from database.repositories.base import BaseRepository, to_uuid

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_for_candidate(self, candidate_id: Any) -> List[Application]:
        candidate_uuid = to_uuid(candidate_id)
        if candidate_uuid is None:
            return []
        stmt = (
            select(Application)
            .where(Application.candidate_id == candidate_uuid)
            .order_by(Application.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_for_jobs(self, job_ids: Iterable[Any], status: Optional[str] = None) -> List[Application]:
        """Applications to any of the given jobs, with candidate and job records loaded. Newest first."""
        ids = [j for j in (to_uuid(v) for v in job_ids) if j is not None]
        if not ids:
            return []
        stmt = (
            select(Application)
            .options(
                selectinload(Application.candidate).selectinload(Profile.candidate_profile),
                selectinload(Application.job).selectinload(Job.employer),
            )
            .where(Application.job_id.in_(ids))
            .order_by(Application.created_at.desc())
        )
        if status:
            stmt = stmt.where(Application.status == status)
        return list(self.db.execute(stmt).scalars().all())
