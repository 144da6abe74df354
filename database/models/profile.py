import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Boolean, Numeric, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from .base import Base


class Profile(Base):
    """
    Account profile shared by candidates, employers and admins.

    Identity comes from the auth backend; this table only holds display data
    and the account role.
    """
    __tablename__ = 'profiles'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    role = Column(Text, nullable=False, default='candidate')  # candidate|employer|admin
    full_name = Column(Text)
    headline = Column(Text)
    location = Column(Text)
    about = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    candidate_profile = relationship("CandidateProfileRecord", back_populates="profile", uselist=False)
    applications = relationship("Application", back_populates="candidate")

    __table_args__ = (
        Index('idx_profiles_role', 'role'),
    )


class CandidateProfileRecord(Base):
    """
    Candidate-specific attributes used for matching.
    """
    __tablename__ = 'candidate_profiles'

    user_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), primary_key=True)
    years_experience = Column(Integer)
    salary_min = Column(Numeric(12, 2))
    salary_max = Column(Numeric(12, 2))
    work_type = Column(ARRAY(Text))   # onsite|remote|hybrid
    skills = Column(ARRAY(Text))
    resume_url = Column(Text)
    visible = Column(Boolean, nullable=False, default=True)
    bio = Column(Text)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    profile = relationship("Profile", back_populates="candidate_profile")

    __table_args__ = (
        Index('idx_candidate_profiles_visible', 'visible'),
    )
