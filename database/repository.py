import logging

from sqlalchemy.orm import Session

from database.repositories import (
    ApplicationRepository,
    CandidateRepository,
    EmployerRepository,
    JobRepository,
    MatchRepository,
)

logger = logging.getLogger(__name__)


class MarketplaceRepository:
    """Facade over the per-table repositories, all bound to one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobRepository(db)
        self.employers = EmployerRepository(db)
        self.candidates = CandidateRepository(db)
        self.applications = ApplicationRepository(db)
        self.matches = MatchRepository(db)

    def commit(self):
        self.db.commit()

