"""
Models for django-blog-api.

All models are importable from blog_api.models:

    from blog_api.models import User, Blog, Comment, Reply
"""
from .users import User, UserManager
from .blogs import Blog
from .comments import Comment, Reply

__all__ = [
    # Accounts
    "User",
    "UserManager",
    # Blogs
    "Blog",
    # Discussion
    "Comment",
    "Reply",
]
