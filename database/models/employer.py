import uuid

from sqlalchemy import Column, Text, ForeignKey, Boolean, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .base import Base


class Employer(Base):
    __tablename__ = 'employers'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='SET NULL'))
    name = Column(Text, nullable=False)
    description = Column(Text)
    website = Column(Text)
    location = Column(Text)
    verified = Column(Boolean, nullable=False, default=False)

    jobs = relationship("Job", back_populates="employer")

    __table_args__ = (
        Index('idx_employers_owner', 'owner_id'),
    )
