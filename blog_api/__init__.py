"""
django-blog-api - a JSON blog backend for Django.

Features:
- Email/password accounts with bearer token (JWT) authentication
- Ownership-scoped blog CRUD with cover images
- Two-level discussion threads (comments and replies)
- Content-addressed image storage with SHA256 deduplication
"""

__version__ = "0.1.0"
