"""
Image storage for content and profile pictures.

Inline images arrive as ``data:image/<ext>;base64,<payload>`` strings and
are written to the uploads directory under a random name. Files are only
ever deleted when their URL lives under the uploads URL, so external image
references are left alone.
"""
import base64
import binascii
import logging
import os
import re
import secrets
import time
from io import BytesIO

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage
from PIL import Image, UnidentifiedImageError

from .conf import blog_settings
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r"^data:image/([A-Za-z+\-/]+);base64,(.+)$", re.DOTALL)


def get_upload_storage(directory=None):
    """Return file storage rooted at MEDIA_ROOT/<directory>."""
    directory = (directory or blog_settings.UPLOAD_DIR).strip("/")
    media_url = settings.MEDIA_URL or "/"
    if not media_url.endswith("/"):
        media_url += "/"
    return FileSystemStorage(
        location=os.path.join(settings.MEDIA_ROOT, directory),
        base_url=f"{media_url}{directory}/",
    )


def is_inline_image(value):
    """Check whether a value is a base64 data URL rather than a reference."""
    return isinstance(value, str) and value.startswith("data:image")


def verify_image(data):
    """Raise ValidationError unless ``data`` decodes as an image."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValidationError("Uploaded data is not a valid image") from exc


def decode_inline_image(data_url):
    """
    Split a data URL into (extension, raw bytes).

    Raises ValidationError for anything that is not a base64 image.
    """
    match = DATA_URL_RE.match(data_url)
    if not match:
        raise ValidationError("Invalid image format")

    extension = match.group(1).split("+")[0].split("/")[0].lower()
    try:
        raw = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("Invalid image encoding") from exc

    verify_image(raw)
    return extension, raw


def save_inline_image(data_url):
    """Write a data URL image to the uploads directory and return its URL."""
    extension, raw = decode_inline_image(data_url)
    storage = get_upload_storage()
    name = storage.save(f"{secrets.token_hex(16)}.{extension}", ContentFile(raw))
    logger.info("Saved uploaded image %s (%d bytes)", name, len(raw))
    return storage.url(name)


def resolve_image_url(value):
    """
    Turn a submitted imageUrl into the value to store.

    Returns (url, written) where ``written`` is True when a new file was
    created for an inline payload.
    """
    if is_inline_image(value):
        return save_inline_image(value), True
    if isinstance(value, str) and value.strip():
        return value.strip(), False
    return None, False


def delete_uploaded_file(url, directory=None):
    """
    Remove a previously uploaded file given its URL.

    URLs outside the uploads URL are ignored. Returns True when a file was
    removed.
    """
    storage = get_upload_storage(directory)
    if not url or not url.startswith(storage.base_url):
        return False

    name = os.path.basename(url[len(storage.base_url):])
    if not name or not storage.exists(name):
        return False

    try:
        storage.delete(name)
    except OSError:
        logger.exception("Could not delete uploaded file %s", name)
        return False
    logger.info("Deleted uploaded file %s", name)
    return True


def save_profile_picture(upload):
    """
    Validate and store an uploaded profile picture.

    Args:
        upload: Django UploadedFile

    Returns:
        URL of the stored picture
    """
    extension = os.path.splitext(upload.name or "")[1].lower()
    if extension not in blog_settings.PROFILE_PICTURE_EXTENSIONS:
        raise ValidationError("Only image files are allowed!")

    content_type = getattr(upload, "content_type", "") or ""
    if not content_type.startswith("image/"):
        raise ValidationError("Only image files are allowed!")

    max_bytes = blog_settings.PROFILE_PICTURE_MAX_SIZE_MB * 1024 * 1024
    if upload.size > max_bytes:
        raise ValidationError(
            f"Profile picture must be smaller than {blog_settings.PROFILE_PICTURE_MAX_SIZE_MB} MB"
        )

    raw = upload.read()
    verify_image(raw)

    storage = get_upload_storage(blog_settings.PROFILE_UPLOAD_DIR)
    filename = f"profile-{int(time.time() * 1000)}-{secrets.token_hex(8)}{extension}"
    name = storage.save(filename, ContentFile(raw))
    logger.info("Saved profile picture %s", name)
    return storage.url(name)
