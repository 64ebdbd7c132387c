import logging
import os
import shutil
import uuid

from app.core.config import settings
from app.core.errors import ValidationError

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"

# Served back through StaticFiles, so only image types are accepted
ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


def _extension(upload) -> str:
    _, ext = os.path.splitext(upload.filename or "")
    return ext.lower()


def validate_image_uploads(uploads, field: str = "images") -> None:
    """Reject the whole batch if any file is not an allowed image type."""
    errors = [
        {"field": field, "message": f"{upload.filename or 'file'}: unsupported image type"}
        for upload in uploads
        if _extension(upload) not in ALLOWED_IMAGE_EXTENSIONS
    ]
    if errors:
        raise ValidationError(errors)


def save_upload(upload) -> str:
    """Copy an uploaded file into UPLOAD_DIR under a random name.

    Returns the public path the file is served at.
    """
    ext = _extension(upload)
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError([{"field": "images", "message": "Unsupported image type"}])

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    filename = f"{uuid.uuid4().hex}{ext}"
    with open(os.path.join(settings.UPLOAD_DIR, filename), "wb") as out:
        shutil.copyfileobj(upload.file, out)
    return f"{UPLOAD_URL_PREFIX}/{filename}"


def remove_upload(url: str) -> bool:
    """Delete the stored file behind an ``/uploads/...`` URL.

    External URLs are left alone. Returns True when a file was removed.
    """
    if not url.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return False
    path = os.path.join(settings.UPLOAD_DIR, os.path.basename(url))
    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    except OSError:
        logger.warning("Could not remove uploaded file %s", path, exc_info=True)
        return False
    return True
