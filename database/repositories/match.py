import logging
from typing import Any, Dict, Sequence

from sqlalchemy.dialects.postgresql import insert

from database.models import Match
from database.repositories.base import BaseRepository, to_uuid

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def upsert_matches(self, rows: Sequence[Dict[str, Any]]) -> int:
        """Insert or overwrite match rows keyed on (job_id, candidate_id).

        Each row needs job_id, candidate_id and match_score; explanation and
        top_missing_skills are optional.
        """
        values = []
        for row in rows:
            job_uuid = to_uuid(row['job_id'])
            candidate_uuid = to_uuid(row['candidate_id'])
            if job_uuid is None or candidate_uuid is None:
                logger.warning(f"Skipping match row with invalid ids: job={row['job_id']} candidate={row['candidate_id']}")
                continue
            values.append({
                'job_id': job_uuid,
                'candidate_id': candidate_uuid,
                'match_score': int(row['match_score']),
                'explanation': row.get('explanation'),
                'top_missing_skills': list(row.get('top_missing_skills') or []),
            })

        if not values:
            return 0

        stmt = insert(Match).values(values)
        stmt = stmt.on_conflict_do_update(
            index_elements=['job_id', 'candidate_id'],
            set_={
                'match_score': stmt.excluded.match_score,
                'explanation': stmt.excluded.explanation,
                'top_missing_skills': stmt.excluded.top_missing_skills,
            }
        )
        self.db.execute(stmt)
        logger.info(f"Upserted {len(values)} matches")
        return len(values)

