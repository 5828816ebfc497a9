"""
User API endpoints.

Handles registration, cookie-based login/logout and profile updates.
"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, File, Form, Response, UploadFile, status
from jwt.exceptions import InvalidTokenError
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.logging import get_logger
from app.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from app.db.session import get_db
from app.models import User, UserRole
from app.models.user import default_profile
from app.services.media import MediaUploader, get_media_uploader
from app.services.profile import apply_profile_update
from app.services.uploads import (
    PROFILE_PHOTO_MAX_BYTES,
    PROFILE_PHOTO_MIMETYPES,
    PROFILE_UPDATE_MAX_BYTES,
    PROFILE_UPDATE_MIMETYPES,
    ValidatedUpload,
    validate_upload,
)

logger = get_logger("user")

router = APIRouter()

TOKEN_COOKIE = "token"


# ============== Pydantic Schemas ==============


class LoginRequest(BaseModel):
    """Schema for login. Fields are checked by the endpoint so a missing one
    gets the same response as an empty one."""

    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class ProfileResponse(BaseModel):
    """Public part of the profile sub-document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bio: str = ""
    skills: list[str] = []
    profile_photo: str = ""
    resume: Optional[str] = None
    resume_original_name: Optional[str] = None


class UserResponse(BaseModel):
    """Sanitized user projection (never includes the password hash)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    fullname: str
    email: str
    phone_number: str
    role: str
    profile: ProfileResponse


# ============== Helper Functions ==============


def serialize_user(user: User) -> dict:
    """Build the outbound representation of a user."""
    return UserResponse(
        id=user.id,
        fullname=user.fullname,
        email=user.email,
        phone_number=user.phone_number,
        role=user.role,
        profile=ProfileResponse(**(user.profile or {})),
    ).model_dump(by_alias=True)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email address."""
    return db.query(User).filter(User.email == email).first()


def set_token_cookie(response: Response, token: str, max_age: int) -> None:
    """Set the session cookie usable by a cross-origin frontend."""
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=settings.is_production,
        samesite="none",
    )


def commit_or_conflict(db: Session) -> None:
    """Commit, turning a unique-email violation into a ConflictError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Email uniqueness violated at commit: {e.orig}")
        raise ConflictError("User already exists with this email.") from e


async def get_current_user_id(token: Optional[str] = Cookie(None)) -> str:
    """
    Dependency resolving the authenticated user id from the session cookie.

    Raises AuthError (401) if the cookie is missing or the token is invalid.
    """
    if not token:
        raise AuthError("User not authenticated", status_code=status.HTTP_401_UNAUTHORIZED)

    try:
        return decode_access_token(token)
    except InvalidTokenError:
        raise AuthError("Invalid or expired token", status_code=status.HTTP_401_UNAUTHORIZED)


# ============== API Endpoints ==============


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    uploader: MediaUploader = Depends(get_media_uploader),
):
    """
    Register a new user.

    The duplicate-email check runs before any upload so a rejected
    registration never costs a call to the media host.
    """
    if not fullname or not email or not phone_number or not password or not role:
        raise ValidationError("Something is missing")

    if role not in (UserRole.APPLICANT.value, UserRole.RECRUITER.value):
        raise ValidationError("Role must be 'applicant' or 'recruiter'")

    if get_user_by_email(db, email):
        raise ConflictError("User already exists with this email.")

    hashed_password = get_password_hash(password)

    profile = default_profile()

    if file is not None:
        photo = validate_upload(
            await file.read(),
            file.content_type,
            file.filename,
            max_bytes=PROFILE_PHOTO_MAX_BYTES,
            allowed_mimetypes=PROFILE_PHOTO_MIMETYPES,
            type_error_message="Unsupported file type for profile photo.",
        )
        profile["profile_photo"] = uploader.upload(photo.content, photo.mimetype)

    new_user = User(
        fullname=fullname,
        email=email,
        phone_number=str(phone_number),
        hashed_password=hashed_password,
        role=role,
        profile=profile,
    )

    db.add(new_user)
    commit_or_conflict(db)
    db.refresh(new_user)

    logger.info(f"Registered {new_user.role} account {new_user.id}")

    return {
        "message": "Account created successfully.",
        "success": True,
        "user": serialize_user(new_user),
    }


@router.post("/login")
async def login(
    user_data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Login and receive the session cookie.

    Unknown email and wrong password share one message; a role mismatch
    gets its own.
    """
    if not user_data.email or not user_data.password or not user_data.role:
        raise ValidationError("Something is missing")

    user = get_user_by_email(db, user_data.email)
    if not user or not verify_password(user_data.password, user.hashed_password):
        logger.info("Login rejected: incorrect email or password")
        raise AuthError("Incorrect email or password.")

    if user_data.role != user.role:
        logger.info(f"Login rejected for {user.id}: role mismatch")
        raise AuthError("Account doesn't exist with current role.")

    token = create_access_token(user.id)
    set_token_cookie(response, token, max_age=settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 60 * 60)

    logger.info(f"User {user.id} logged in")

    return {
        "message": f"Welcome back {user.fullname}",
        "user": serialize_user(user),
        "success": True,
    }


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(response: Response):
    """Expire the session cookie."""
    set_token_cookie(response, "", max_age=0)
    return {"message": "Logged out successfully.", "success": True}


@router.api_route("/profile/update", methods=["POST", "PUT"])
async def update_profile(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    uploader: MediaUploader = Depends(get_media_uploader),
):
    """
    Update the current user's profile.

    Only provided fields change. An image upload replaces the profile photo,
    a PDF replaces the resume.
    """
    upload: Optional[ValidatedUpload] = None
    upload_url: Optional[str] = None

    if file is not None:
        upload = validate_upload(
            await file.read(),
            file.content_type,
            file.filename,
            max_bytes=PROFILE_UPDATE_MAX_BYTES,
            allowed_mimetypes=PROFILE_UPDATE_MIMETYPES,
        )
        upload_url = uploader.upload(upload.content, upload.mimetype)

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found.")

    apply_profile_update(
        user,
        fullname=fullname,
        email=email,
        phone_number=phone_number,
        bio=bio,
        skills=skills,
        upload=upload,
        upload_url=upload_url,
    )

    commit_or_conflict(db)
    db.refresh(user)

    logger.info(f"Updated profile of {user.id}")

    return {
        "message": "Profile updated successfully.",
        "user": serialize_user(user),
        "success": True,
    }
