import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Numeric, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from .base import Base


class Job(Base):
    __tablename__ = 'jobs'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employer_id = Column(UUID(as_uuid=True), ForeignKey('employers.id', ondelete='CASCADE'), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text)
    skills_required = Column(ARRAY(Text))
    location = Column(Text)
    remote = Column(Boolean, nullable=False, default=False)
    job_type = Column(Text)           # full_time|part_time|contract|internship
    experience_level = Column(Text)   # entry|mid|senior|lead|executive
    salary_min = Column(Numeric(12, 2))
    salary_max = Column(Numeric(12, 2))
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    employer = relationship("Employer", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
    matches = relationship("Match", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jobs_employer', 'employer_id'),
        Index('idx_jobs_active_created', 'active', 'created_at'),
    )
