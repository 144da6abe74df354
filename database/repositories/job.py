import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import Employer, Job
from database.repositories.base import BaseRepository, to_uuid

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[Job]:
        job_uuid = to_uuid(job_id)
        if job_uuid is None:
            return None
        stmt = select(Job).options(selectinload(Job.employer)).where(Job.id == job_uuid)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active_jobs(self, limit: int = 50) -> List[Job]:
        """Active jobs, newest first."""
        stmt = (
            select(Job)
            .options(selectinload(Job.employer))
            .where(Job.active.is_(True))
            .order_by(Job.created_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_employer(self, employer_id: Any, job_id: Optional[Any] = None) -> List[Job]:
        employer_uuid = to_uuid(employer_id)
        if employer_uuid is None:
            return []
        stmt = (
            select(Job)
            .options(selectinload(Job.employer))
            .where(Job.employer_id == employer_uuid)
            .order_by(Job.created_at.desc())
        )
        if job_id is not None:
            job_uuid = to_uuid(job_id)
            if job_uuid is None:
                return []
            stmt = stmt.where(Job.id == job_uuid)
        return list(self.db.execute(stmt).scalars().all())


class EmployerRepository(BaseRepository):
    def get_by_id(self, employer_id: Any) -> Optional[Employer]:
        employer_uuid = to_uuid(employer_id)
        if employer_uuid is None:
            return None
        return self.db.execute(select(Employer).where(Employer.id == employer_uuid)).scalar_one_or_none()
