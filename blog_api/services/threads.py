"""
Thread manager: append comments and replies to a blog.

Comments and replies are only reachable through their blog, so a reply is
addressed by the (blog, comment) path and can never be orphaned.
"""
import logging

from django.db import transaction
from django.db.models import Max

from .. import exceptions
from ..conf import blog_settings
from ..models import Comment, Reply
from .blogs import BlogRepository, clean_text, parse_id

logger = logging.getLogger(__name__)


def _next_position(queryset):
    current = queryset.aggregate(last=Max("position"))["last"]
    return (current or 0) + 1


class ThreadManager:
    """
    Append-only access to the discussion under a blog.

    Any authenticated user may comment or reply; blog ownership is not
    required.
    """

    def __init__(self, using=None, blogs=None):
        self.using = using or blog_settings.DATABASE_ALIAS
        self.blogs = blogs or BlogRepository(using=self.using)

    def _clean(self, text, label):
        text = clean_text(text)
        if not text:
            raise exceptions.ValidationError(f"{label} text is required")
        if len(text) > blog_settings.COMMENT_MAX_LENGTH:
            raise exceptions.ValidationError(
                f"{label} text exceeds {blog_settings.COMMENT_MAX_LENGTH} characters"
            )
        return text

    def add_comment(self, blog_id, author_id, text):
        """Append a comment to the blog and return it."""
        text = self._clean(text, "Comment")

        with transaction.atomic(using=self.using):
            blog = self.blogs.lookup(blog_id, for_update=True)
            comment = Comment.objects.using(self.using).create(
                blog=blog,
                author_id=author_id,
                text=text,
                position=_next_position(blog.comments.all()),
            )

        logger.info("User %s commented on blog %s", author_id, blog.pk)
        return comment

    def add_reply(self, blog_id, comment_id, author_id, text):
        """
        Append a reply to a comment of the blog and return it.

        A missing blog and a comment outside the blog both raise NotFound.
        """
        text = self._clean(text, "Reply")

        with transaction.atomic(using=self.using):
            blog = self.blogs.lookup(blog_id, for_update=True)
            pk = parse_id(comment_id)
            comment = blog.comments.filter(pk=pk).first() if pk else None
            if comment is None:
                raise exceptions.NotFound("Comment not found")

            reply = Reply.objects.using(self.using).create(
                comment=comment,
                author_id=author_id,
                text=text,
                position=_next_position(comment.replies.all()),
            )

        logger.info("User %s replied to comment %s", author_id, comment.pk)
        return reply
