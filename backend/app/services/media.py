"""
Media uploader for profile photos and resumes.

Files are sent to Cloudinary as base64 data URIs through the Cloudinary SDK;
only the returned secure URL is kept by the application.
"""

import base64
from typing import Callable, Optional

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import Request

from app.core.config import settings
from app.core.exceptions import UploadError
from app.core.logging import get_logger

logger = get_logger("media")


def get_data_uri(content: bytes, mimetype: str) -> str:
    """Encode raw bytes as a ``data:`` URI."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mimetype};base64,{encoded}"


class MediaUploader:
    """Uploads in-memory files to Cloudinary and returns their public URL."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30.0,
        upload_fn: Optional[Callable[..., dict]] = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        # Injectable for tests; defaults to the SDK call
        self._upload_fn = upload_fn or cloudinary.uploader.upload

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def upload(self, content: bytes, mimetype: str) -> str:
        """
        Upload a file and return its secure URL.

        Raises:
            UploadError: missing credentials, SDK/transport failure or a
                response without ``secure_url``
        """
        if not self.is_configured:
            raise UploadError("File upload is not configured.")

        try:
            result = self._upload_fn(
                get_data_uri(content, mimetype),
                resource_type="auto",
                cloud_name=self.cloud_name,
                api_key=self.api_key,
                api_secret=self.api_secret,
                timeout=self.timeout,
            )
        except CloudinaryError as e:
            logger.error(f"Media host upload failed: {e}")
            raise UploadError("Failed to upload file.") from e

        secure_url = result.get("secure_url") if isinstance(result, dict) else None
        if not secure_url:
            logger.error("Media host response did not include a secure_url")
            raise UploadError("Failed to upload file.")

        logger.info(f"Uploaded {mimetype} ({len(content)} bytes) to {secure_url}")
        return secure_url


def build_media_uploader() -> MediaUploader:
    """Create the uploader from application settings."""
    return MediaUploader(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        timeout=settings.UPLOAD_TIMEOUT,
    )


def get_media_uploader(request: Request) -> MediaUploader:
    """FastAPI dependency returning the uploader built at startup."""
    return request.app.state.media_uploader
