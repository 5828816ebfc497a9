import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, JSON, String
from sqlalchemy.orm import relationship

from app.db.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, Enum):
    APPLICANT = "applicant"
    RECRUITER = "recruiter"


def default_profile() -> dict:
    return {
        "bio": "",
        "skills": [],
        "profile_photo": "",
        "resume": None,
        "resume_original_name": None,
    }


class User(Base):
    """User account for authentication and profile data."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    fullname = Column(String, nullable=False)
    # Unique index is the authoritative guard against duplicate registrations
    email = Column(String, unique=True, index=True, nullable=False)
    phone_number = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # 'applicant' | 'recruiter'

    # Profile sub-document: bio, skills, profile_photo, resume, resume_original_name
    profile = Column(JSON, default=default_profile, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    jobs = relationship("Job", back_populates="creator")
