"""
JobPortal Database Seeder

Creates demo accounts and a few job postings:
- Recruiter (Sarah Chen) who owns the jobs
- Applicant (John Doe) with a filled-in profile
"""

import sys
sys.path.insert(0, ".")

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_password_hash
from app.db.base import Base
from app.db.session import create_db_engine, create_session_factory
from app.models.job import Job
from app.models.user import User, UserRole, default_profile

RECRUITER_EMAIL = "recruiter@jobportal.com"
APPLICANT_EMAIL = "john.doe@example.com"

DEMO_JOBS = [
    {
        "title": "Backend Developer",
        "description": "Build and maintain REST APIs with FastAPI and PostgreSQL.",
        "requirements": ["Python", "FastAPI", "SQL"],
        "salary": 12.0,
        "location": "Bangalore",
        "job_type": "Full-time",
        "experience_level": 2,
        "position": 3,
    },
    {
        "title": "Frontend Developer",
        "description": "Ship React features for our job seeker dashboard.",
        "requirements": ["JavaScript", "React", "CSS"],
        "salary": 10.0,
        "location": "Remote",
        "job_type": "Full-time",
        "experience_level": 1,
        "position": 2,
    },
    {
        "title": "Data Analyst Intern",
        "description": "Analyse hiring funnels and build weekly reports.",
        "requirements": ["SQL", "Pandas"],
        "salary": 3.0,
        "location": "Hyderabad",
        "job_type": "Internship",
        "experience_level": 0,
        "position": 1,
    },
]


def seed_database(db: Session) -> bool:
    """
    Seed the database with demo data.

    Returns False if the demo recruiter already exists and nothing was added.
    """
    existing_recruiter = db.query(User).filter(User.email == RECRUITER_EMAIL).first()
    if existing_recruiter:
        print("Database already seeded. Skipping...")
        return False

    print("Seeding database...")

    # 1. Create Recruiter User
    recruiter = User(
        fullname="Sarah Chen",
        email=RECRUITER_EMAIL,
        phone_number="9000000001",
        hashed_password=get_password_hash("recruiter123"),
        role=UserRole.RECRUITER.value,
        profile=default_profile(),
    )
    db.add(recruiter)

    # 2. Create Applicant User - John Doe
    applicant_profile = default_profile()
    applicant_profile.update({
        "bio": "Backend developer with 4 years of Python experience.",
        "skills": ["Python", "React", "FastAPI", "Docker"],
    })
    applicant = User(
        fullname="John Doe",
        email=APPLICANT_EMAIL,
        phone_number="9000000002",
        hashed_password=get_password_hash("applicant123"),
        role=UserRole.APPLICANT.value,
        profile=applicant_profile,
    )
    db.add(applicant)
    db.flush()  # Get IDs

    # 3. Jobs owned by the recruiter
    for job in DEMO_JOBS:
        db.add(Job(company="Acme Corp", created_by=recruiter.id, **job))

    db.commit()

    print("\n" + "=" * 50)
    print("Database seeded successfully!")
    print("=" * 50)
    print("\nTest Accounts:")
    print(f"  Recruiter: {RECRUITER_EMAIL} / recruiter123")
    print(f"  Applicant: {APPLICANT_EMAIL} / applicant123")
    print(f"\n{len(DEMO_JOBS)} jobs posted by Sarah Chen")
    print("=" * 50)

    return True


if __name__ == "__main__":
    engine = create_db_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    db = create_session_factory(engine)()
    try:
        seed_database(db)
    finally:
        db.close()
        engine.dispose()
