"""
Image ingest for django-blog-api.

Uploads are stored under a name derived from the SHA256 of their content,
so names never collide and the same file uploaded twice is stored once.
"""
import hashlib
import logging

from django.core.files.storage import default_storage
from PIL import Image

from . import exceptions
from .conf import blog_settings

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "GIF": ".gif",
    "WEBP": ".webp",
}


def content_hash(file_obj):
    """Return the SHA256 hex digest of an uploaded file's content."""
    hasher = hashlib.sha256()
    for chunk in file_obj.chunks():
        hasher.update(chunk)
    return hasher.hexdigest()


def _verify_image(file_obj):
    """
    Check that Pillow can parse the upload as an image.

    Returns the file extension for the format Pillow detected.
    """
    file_obj.seek(0)
    try:
        with Image.open(file_obj) as img:
            image_format = img.format
            img.verify()
    except (OSError, SyntaxError, ValueError):
        raise exceptions.ValidationError("Uploaded file is not a valid image")
    finally:
        file_obj.seek(0)

    extension = IMAGE_EXTENSIONS.get(image_format)
    if extension is None or Image.MIME.get(image_format) not in blog_settings.ALLOWED_IMAGE_TYPES:
        raise exceptions.ValidationError(f"Unsupported image format: {image_format or 'unknown'}")
    return extension


def store_image(file_obj, storage=None):
    """
    Validate and store an uploaded image.

    Args:
        file_obj: Django UploadedFile (or None when nothing was uploaded)
        storage: Django storage backend, defaults to default_storage

    Returns:
        Reference path (storage URL) of the stored file
    """
    if file_obj is None:
        raise exceptions.ValidationError("Image is required")

    storage = storage or default_storage

    content_type = getattr(file_obj, "content_type", "") or ""
    if content_type not in blog_settings.ALLOWED_IMAGE_TYPES:
        raise exceptions.ValidationError(f"Unsupported image type: {content_type or 'unknown'}")

    max_bytes = blog_settings.MEDIA_MAX_SIZE_MB * 1024 * 1024
    if file_obj.size > max_bytes:
        raise exceptions.ValidationError(
            f"Image exceeds the {blog_settings.MEDIA_MAX_SIZE_MB} MB limit"
        )

    extension = _verify_image(file_obj)

    # The stored name never takes the client's filename or extension.
    name = blog_settings.UPLOAD_PATH + content_hash(file_obj) + extension
    file_obj.seek(0)

    if storage.exists(name):
        logger.debug("Reusing stored image %s", name)
    else:
        name = storage.save(name, file_obj)
        logger.info("Stored image %s (%d bytes)", name, file_obj.size)

    return storage.url(name)
