import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from .base import Base


class Match(Base):
    """
    Stored ranking result for a job/candidate pair.

    One row per pair; re-ranking overwrites score and explanation in place.
    """
    __tablename__ = 'matches'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(UUID(as_uuid=True), ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    candidate_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Integer, nullable=False)
    explanation = Column(Text)
    top_missing_skills = Column(ARRAY(Text))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    job = relationship("Job", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('job_id', 'candidate_id', name='uq_matches_job_candidate'),
        Index('idx_matches_candidate', 'candidate_id'),
        Index('idx_matches_score', 'match_score'),
    )
