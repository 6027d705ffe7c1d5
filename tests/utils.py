"""
Helpers shared by the django-blog-api tests.
"""
import io

from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from blog_api.tokens import TokenIssuer


def make_image(name="cover.png", color="red", image_format="PNG", content_type="image/png"):
    """Build an in-memory image upload."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)


def bearer(user):
    """Return client kwargs carrying a valid bearer token for ``user``."""
    return {"HTTP_AUTHORIZATION": f"Bearer {TokenIssuer().issue(user.pk)}"}
