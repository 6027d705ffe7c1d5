"""
Services for django-blog-api.

    from blog_api.services import AuthService, BlogRepository, ThreadManager
"""
from .auth import AuthService
from .blogs import BlogRepository
from .threads import ThreadManager

__all__ = [
    "AuthService",
    "BlogRepository",
    "ThreadManager",
]
