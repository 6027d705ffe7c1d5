"""
Blog model for django-blog-api.
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Blog(models.Model):
    """
    Blog post and root of its discussion thread.

    Comments and their replies hang off the blog through cascading
    foreign keys, so deleting a blog removes the whole thread with it.
    Only the author may update or delete it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Content
    title = models.CharField(max_length=255)
    description = models.TextField()
    content = models.TextField()
    image = models.CharField(
        max_length=255,
        help_text="Reference path of the stored cover image",
    )

    # Users are referenced, never owned: deleting an author must not
    # take their blogs down with them.
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="blogs",
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["author", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    def is_owned_by(self, user_id):
        """Check whether ``user_id`` is the blog's author."""
        return user_id is not None and str(self.author_id) == str(user_id)

    def to_dict(self, include_comments=True):
        """
        Serialize the blog for API responses.

        Comments are only included when requested; callers that want them
        should prefetch ``comments__author`` and ``comments__replies__author``
        to keep the query count flat.
        """
        data = {
            "id": str(self.pk),
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "image": self.image,
            "authorId": str(self.author_id),
            "author": self.author.to_public_dict(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_comments:
            data["comments"] = [comment.to_dict() for comment in self.comments.all()]
        return data
