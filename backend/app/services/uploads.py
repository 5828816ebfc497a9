"""
Upload validation.

Checks size and mimetype of an incoming file and classifies it as an image
or a document, so callers route it without re-inspecting the mimetype.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.core.exceptions import ValidationError

MB = 1024 * 1024

IMAGE_MIMETYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp"})
DOCUMENT_MIMETYPES = frozenset({"application/pdf"})

# Registration only accepts a profile photo
PROFILE_PHOTO_MAX_BYTES = 5 * MB
PROFILE_PHOTO_MIMETYPES = IMAGE_MIMETYPES

# Profile update accepts a photo or a resume
PROFILE_UPDATE_MAX_BYTES = 8 * MB
PROFILE_UPDATE_MIMETYPES = IMAGE_MIMETYPES | DOCUMENT_MIMETYPES


class FileKind(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"


@dataclass(frozen=True)
class ValidatedUpload:
    """A file that passed validation and is ready to be sent to the media host."""

    kind: FileKind
    content: bytes
    mimetype: str
    filename: Optional[str] = None


def classify_mimetype(mimetype: str) -> FileKind:
    if mimetype in IMAGE_MIMETYPES:
        return FileKind.IMAGE
    if mimetype in DOCUMENT_MIMETYPES:
        return FileKind.DOCUMENT
    raise ValidationError("Unsupported file type.")


def validate_upload(
    content: bytes,
    mimetype: Optional[str],
    filename: Optional[str] = None,
    *,
    max_bytes: int,
    allowed_mimetypes: frozenset,
    type_error_message: str = "Unsupported file type.",
) -> ValidatedUpload:
    """
    Validate an uploaded file and tag it with its kind.

    Raises:
        ValidationError: file too large, mimetype not allowed, or empty file
    """
    if len(content) > max_bytes:
        raise ValidationError(f"Uploaded file is too large (max {max_bytes // MB}MB).")

    mimetype = (mimetype or "").strip().lower()
    if mimetype not in allowed_mimetypes:
        raise ValidationError(type_error_message)

    if not content:
        raise ValidationError("Invalid file data.")

    return ValidatedUpload(
        kind=classify_mimetype(mimetype),
        content=content,
        mimetype=mimetype,
        filename=filename or None,
    )
