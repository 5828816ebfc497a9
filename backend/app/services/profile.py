"""Profile update helpers."""

from typing import Optional

from app.models import User
from app.services.uploads import FileKind, ValidatedUpload


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string, dropping blanks and keeping order."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def apply_profile_update(
    user: User,
    *,
    fullname: Optional[str] = None,
    email: Optional[str] = None,
    phone_number: Optional[str] = None,
    bio: Optional[str] = None,
    skills: Optional[str] = None,
    upload: Optional[ValidatedUpload] = None,
    upload_url: Optional[str] = None,
) -> None:
    """
    Overwrite only the fields that were provided.

    An uploaded image replaces the profile photo; an uploaded document
    replaces the resume and its display name.
    """
    if fullname:
        user.fullname = fullname
    if email:
        user.email = email
    if phone_number:
        user.phone_number = str(phone_number)

    # Copy so SQLAlchemy sees a new value for the JSON column
    profile = dict(user.profile or {})

    if bio:
        profile["bio"] = bio
    if skills:
        profile["skills"] = parse_skills(skills)

    if upload is not None and upload_url:
        if upload.kind is FileKind.IMAGE:
            profile["profile_photo"] = upload_url
        elif upload.kind is FileKind.DOCUMENT:
            profile["resume"] = upload_url
            if upload.filename:
                profile["resume_original_name"] = upload.filename

    user.profile = profile
