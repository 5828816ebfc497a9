from app.services.media import MediaUploader, build_media_uploader, get_data_uri
from app.services.profile import apply_profile_update, parse_skills
from app.services.uploads import FileKind, ValidatedUpload, validate_upload

__all__ = [
    "MediaUploader",
    "build_media_uploader",
    "get_data_uri",
    "apply_profile_update",
    "parse_skills",
    "FileKind",
    "ValidatedUpload",
    "validate_upload",
]
