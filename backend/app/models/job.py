from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.models.user import generate_uuid, utcnow


class Job(Base):
    """Job posting published by a recruiter."""

    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, default=list)  # ["Python", "SQL", ...]
    salary = Column(Float, nullable=False)
    location = Column(String, nullable=False)
    job_type = Column(String, nullable=False)  # "Full-time", "Internship", ...
    experience_level = Column(Integer, nullable=False)  # years
    position = Column(Integer, nullable=False)  # open seats
    company = Column(String, nullable=False)

    created_by = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

    # Relationships
    creator = relationship("User", back_populates="jobs")
