import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .base import Base


ACTIVE_APPLICATION_STATUSES = ('pending', 'reviewed', 'interviewed', 'new', 'shortlisted', 'interview')


class Application(Base):
    __tablename__ = 'applications'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(UUID(as_uuid=True), ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    candidate_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    cover_letter = Column(Text)
    status = Column(Text, nullable=False, default='pending')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    job = relationship("Job", back_populates="applications")
    candidate = relationship("Profile", back_populates="applications")

    __table_args__ = (
        Index('idx_applications_job', 'job_id'),
        Index('idx_applications_candidate', 'candidate_id'),
        Index('idx_applications_status', 'status'),
    )
