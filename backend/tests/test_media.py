import base64

import pytest
from cloudinary.exceptions import Error as CloudinaryError
from cloudinary.exceptions import GeneralError

from app.core.exceptions import UploadError
from app.services.media import MediaUploader, get_data_uri

SECURE_URL = "https://res.cloudinary.com/demo/image/upload/v1/abc.png"


class RecordingUpload:
    """Stands in for cloudinary.uploader.upload."""

    def __init__(self, result=None, error=None):
        self.result = {"secure_url": SECURE_URL} if result is None else result
        self.error = error
        self.calls = []

    def __call__(self, file, **options):
        self.calls.append((file, options))
        if self.error is not None:
            raise self.error
        return self.result


def _uploader(upload_fn) -> MediaUploader:
    return MediaUploader(
        cloud_name="demo",
        api_key="key-123",
        api_secret="shh",
        timeout=12.0,
        upload_fn=upload_fn,
    )


def test_get_data_uri():
    uri = get_data_uri(b"hello", "image/png")

    assert uri == "data:image/png;base64," + base64.b64encode(b"hello").decode()


def test_upload_sends_data_uri_with_credentials():
    upload_fn = RecordingUpload()

    url = _uploader(upload_fn).upload(b"png-bytes", "image/png")

    assert url == SECURE_URL
    assert len(upload_fn.calls) == 1

    file, options = upload_fn.calls[0]
    assert file == get_data_uri(b"png-bytes", "image/png")
    assert options == {
        "resource_type": "auto",
        "cloud_name": "demo",
        "api_key": "key-123",
        "api_secret": "shh",
        "timeout": 12.0,
    }


def test_upload_sdk_error_raises_upload_error():
    uploader = _uploader(RecordingUpload(error=CloudinaryError("Invalid Signature")))

    with pytest.raises(UploadError) as exc_info:
        uploader.upload(b"data", "image/png")

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to upload file."


def test_upload_transport_error_raises_upload_error():
    uploader = _uploader(RecordingUpload(error=GeneralError("Socket Error: no route to host")))

    with pytest.raises(UploadError):
        uploader.upload(b"data", "application/pdf")


def test_upload_without_secure_url_raises_upload_error():
    uploader = _uploader(RecordingUpload(result={"public_id": "abc"}))

    with pytest.raises(UploadError):
        uploader.upload(b"data", "image/png")


def test_upload_without_credentials_makes_no_call():
    upload_fn = RecordingUpload()
    uploader = MediaUploader("", "", "", upload_fn=upload_fn)

    assert not uploader.is_configured
    with pytest.raises(UploadError):
        uploader.upload(b"data", "image/png")
    assert upload_fn.calls == []
