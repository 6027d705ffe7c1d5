"""
Comment and Reply models for django-blog-api.

Threads are two levels deep: comments belong to a blog and replies belong
to a comment. Both are append-only.
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Comment(models.Model):
    """
    Comment on a blog.

    ``position`` is the 1-based insertion index within the blog. It is
    assigned while the blog row is locked, and the unique constraint keeps
    two concurrent appends from landing on the same slot.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    blog = models.ForeignKey(
        "blog_api.Blog",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="blog_comments",
    )
    text = models.TextField()
    position = models.PositiveIntegerField(editable=False)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["blog", "position"],
                name="blog_api_unique_comment_position",
            ),
        ]

    def __str__(self):
        return f"Comment by {self.author} on {self.blog}"

    @property
    def preview(self):
        """Return truncated text for admin display."""
        if len(self.text) > 100:
            return self.text[:100] + "..."
        return self.text

    def to_dict(self):
        return {
            "id": str(self.pk),
            "text": self.text,
            "authorId": str(self.author_id),
            "author": self.author.to_public_dict(),
            "createdAt": self.created_at.isoformat(),
            "replies": [reply.to_dict() for reply in self.replies.all()],
        }


class Reply(models.Model):
    """Reply to a comment. Replies cannot be replied to."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    comment = models.ForeignKey(
        Comment,
        on_delete=models.CASCADE,
        related_name="replies",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="blog_replies",
    )
    text = models.TextField()
    position = models.PositiveIntegerField(editable=False)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["position"]
        verbose_name_plural = "Replies"
        constraints = [
            models.UniqueConstraint(
                fields=["comment", "position"],
                name="blog_api_unique_reply_position",
            ),
        ]

    def __str__(self):
        return f"Reply by {self.author} to comment {self.comment_id}"

    def to_dict(self):
        return {
            "id": str(self.pk),
            "text": self.text,
            "authorId": str(self.author_id),
            "author": self.author.to_public_dict(),
            "createdAt": self.created_at.isoformat(),
        }
