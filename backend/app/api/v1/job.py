"""
Job API endpoints.

Public job listing/detail plus posting and "my jobs" for authenticated users.
"""

from datetime import datetime
from typing import Optional, Union

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.api.v1.user import get_current_user_id
from app.core.exceptions import NotFoundError, ValidationError
from app.core.logging import get_logger
from app.db.session import get_db
from app.models import Job
from app.services.profile import parse_skills

logger = get_logger("job")

router = APIRouter()


# ============== Pydantic Schemas ==============


class JobCreateRequest(BaseModel):
    """Schema for posting a job. Numeric fields may arrive as strings from form inputs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None  # comma-separated
    salary: Optional[Union[float, str]] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience: Optional[Union[int, str]] = None
    position: Optional[Union[int, str]] = None
    company: Optional[str] = None


class JobResponse(BaseModel):
    """Outbound job representation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    description: str
    requirements: list[str] = []
    salary: float
    location: str
    job_type: str
    experience_level: int
    position: int
    company: str
    created_by: str
    created_at: Optional[datetime] = None


# ============== Helper Functions ==============


def serialize_job(job: Job) -> dict:
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        requirements=job.requirements or [],
        salary=job.salary,
        location=job.location,
        job_type=job.job_type,
        experience_level=job.experience_level,
        position=job.position,
        company=job.company,
        created_by=job.created_by,
        created_at=job.created_at,
    ).model_dump(by_alias=True, mode="json")


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the keyword matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _to_number(value, cast, field: str):
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid value for {field}.")


# ============== API Endpoints ==============


@router.post("/post", status_code=status.HTTP_201_CREATED)
async def post_job(
    job_data: JobCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Publish a new job owned by the current user."""
    required = (
        job_data.title,
        job_data.description,
        job_data.requirements,
        job_data.salary,
        job_data.location,
        job_data.job_type,
        job_data.experience,
        job_data.position,
        job_data.company,
    )
    if any(value is None or value == "" for value in required):
        raise ValidationError("Something is missing.")

    job = Job(
        title=job_data.title,
        description=job_data.description,
        requirements=parse_skills(job_data.requirements),
        salary=_to_number(job_data.salary, float, "salary"),
        location=job_data.location,
        job_type=job_data.job_type,
        experience_level=_to_number(job_data.experience, int, "experience"),
        position=_to_number(job_data.position, int, "position"),
        company=job_data.company,
        created_by=user_id,
    )

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"User {user_id} posted job {job.id}")

    return {
        "message": "New job created successfully.",
        "job": serialize_job(job),
        "success": True,
    }


@router.get("/get")
async def get_all_jobs(keyword: str = "", db: Session = Depends(get_db)):
    """List jobs whose title or description contains ``keyword``, newest first."""
    query = db.query(Job)

    keyword = keyword.strip()
    if keyword:
        pattern = f"%{escape_like(keyword)}%"
        query = query.filter(
            or_(
                Job.title.ilike(pattern, escape="\\"),
                Job.description.ilike(pattern, escape="\\"),
            )
        )

    jobs = query.order_by(Job.created_at.desc()).all()

    return {"jobs": [serialize_job(job) for job in jobs], "success": True}


@router.get("/get/{job_id}")
async def get_job_by_id(job_id: str, db: Session = Depends(get_db)):
    """Get a single job."""
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job not found.", status_code=status.HTTP_404_NOT_FOUND)

    return {"job": serialize_job(job), "success": True}


@router.get("/getadminjobs")
async def get_admin_jobs(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List jobs created by the current user, newest first."""
    jobs = (
        db.query(Job)
        .filter(Job.created_by == user_id)
        .order_by(Job.created_at.desc())
        .all()
    )

    return {"jobs": [serialize_job(job) for job in jobs], "success": True}
