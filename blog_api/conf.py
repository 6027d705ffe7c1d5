"""
Configuration settings for django-blog-api.

Override these in your Django settings.py:

    BLOG_API = {
        'TOKEN_TTL': 3600,
        'MEDIA_MAX_SIZE_MB': 5,
        'COMMENT_MAX_LENGTH': 5000,
        ...
    }

The app also expects the host project to use its user model:

    AUTH_USER_MODEL = 'blog_api.User'
"""
from django.conf import settings

DEFAULTS = {
    # Bearer tokens
    "TOKEN_SECRET": None,  # falls back to settings.SECRET_KEY
    "TOKEN_ALGORITHM": "HS256",
    "TOKEN_TTL": 3600,  # seconds

    # Database alias the repositories and services run against
    "DATABASE_ALIAS": "default",

    # Media
    "UPLOAD_PATH": "uploads/",
    "MEDIA_MAX_SIZE_MB": 5,
    "ALLOWED_IMAGE_TYPES": ["image/jpeg", "image/png", "image/gif", "image/webp"],

    # Comments and replies
    "COMMENT_MAX_LENGTH": 5000,
}


class BlogApiSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_api.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_api setting: {name}")

        user_settings = getattr(settings, "BLOG_API", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def TOKEN_SECRET(self):
        """Return the token signing secret, defaulting to SECRET_KEY."""
        user_settings = getattr(settings, "BLOG_API", {})
        return user_settings.get("TOKEN_SECRET") or settings.SECRET_KEY


blog_settings = BlogApiSettings()
