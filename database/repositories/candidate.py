import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import CandidateProfileRecord, Profile
from database.repositories.base import BaseRepository, to_uuid

logger = logging.getLogger(__name__)


class CandidateRepository(BaseRepository):
    def get_profile(self, user_id: Any) -> Optional[Profile]:
        """Account profile with its candidate record (if any) loaded."""
        user_uuid = to_uuid(user_id)
        if user_uuid is None:
            return None
        stmt = (
            select(Profile)
            .options(selectinload(Profile.candidate_profile))
            .where(Profile.id == user_uuid)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_visible_candidates(self, limit: int = 100) -> List[Profile]:
        """Candidates with a visible candidate record, most recently updated first."""
        stmt = (
            select(Profile)
            .join(CandidateProfileRecord, CandidateProfileRecord.user_id == Profile.id)
            .options(selectinload(Profile.candidate_profile))
            .where(
                Profile.role == 'candidate',
                CandidateProfileRecord.visible.is_(True),
            )
            .order_by(CandidateProfileRecord.updated_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

