"""
Blog repository: ownership-scoped CRUD over the blog aggregate.

A blog together with its comments and replies is one unit of consistency.
Mutations run in a transaction that locks the blog row first.
"""
import logging
import uuid

from django.db import transaction
from django.db.models import Prefetch

from .. import exceptions
from ..conf import blog_settings
from ..models import Blog, Comment, Reply

logger = logging.getLogger(__name__)

BLOG_FIELDS = ("title", "description", "content", "image")


def parse_id(value):
    """Return ``value`` as a UUID, or None when it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def clean_text(value):
    """Strip a submitted string; anything that is not a string is blank."""
    return value.strip() if isinstance(value, str) else ""


def check_length(name, value):
    """Raise ValidationError when ``value`` does not fit the blog column."""
    max_length = Blog._meta.get_field(name).max_length
    if max_length and len(value) > max_length:
        raise exceptions.ValidationError(f"{name.capitalize()} must be at most {max_length} characters")


class BlogRepository:
    """
    Create, read, update and delete blogs.

    Args:
        using: database alias the blog tables live in
    """

    def __init__(self, using=None):
        self.using = using or blog_settings.DATABASE_ALIAS

    def _blogs(self):
        return Blog.objects.using(self.using)

    @staticmethod
    def clean_fields(**values):
        """
        Strip the given fields and require every one to be non-empty.

        Returns the cleaned values as a dict.
        """
        cleaned = {name: clean_text(value) for name, value in values.items()}
        if not all(cleaned.values()):
            raise exceptions.ValidationError("All fields are required")
        for name, value in cleaned.items():
            check_length(name, value)
        return cleaned

    def lookup(self, blog_id, for_update=False):
        """Fetch a blog by id or raise NotFound."""
        pk = parse_id(blog_id)
        if pk is None:
            raise exceptions.NotFound("Blog not found")

        qs = self._blogs()
        if for_update:
            qs = qs.select_for_update()
        try:
            return qs.get(pk=pk)
        except Blog.DoesNotExist:
            raise exceptions.NotFound("Blog not found")

    def create(self, author_id, title, description, content, image):
        fields = self.clean_fields(
            title=title,
            description=description,
            content=content,
            image=image,
        )
        blog = self._blogs().create(author_id=author_id, **fields)
        logger.info("User %s created blog %s", author_id, blog.pk)
        return blog

    def list_by_author(self, author_id):
        """Return the author's blogs, newest first."""
        pk = parse_id(author_id)
        if pk is None:
            return []
        return list(
            self._blogs()
            .filter(author_id=pk)
            .select_related("author")
            .order_by("-created_at")
        )

    def get_by_id(self, blog_id):
        """
        Return a blog with its thread loaded.

        Blog, comment and reply authors are each resolved in their own pass.
        """
        pk = parse_id(blog_id)
        if pk is None:
            raise exceptions.NotFound("Blog not found")

        replies = Reply.objects.using(self.using).select_related("author")
        comments = (
            Comment.objects.using(self.using)
            .select_related("author")
            .prefetch_related(Prefetch("replies", queryset=replies))
        )
        qs = (
            self._blogs()
            .select_related("author")
            .prefetch_related(Prefetch("comments", queryset=comments))
        )
        try:
            return qs.get(pk=pk)
        except Blog.DoesNotExist:
            raise exceptions.NotFound("Blog not found")

    def get_owned(self, blog_id, caller_id, for_update=False):
        """Return the blog if it exists and ``caller_id`` owns it."""
        blog = self.lookup(blog_id, for_update=for_update)
        if not blog.is_owned_by(caller_id):
            logger.warning("User %s denied access to blog %s", caller_id, blog.pk)
            raise exceptions.Forbidden("Unauthorized")
        return blog

    def update(self, blog_id, caller_id, patch):
        """
        Apply a partial update.

        Only fields present in ``patch`` with a non-blank value are replaced.
        """
        with transaction.atomic(using=self.using):
            blog = self.get_owned(blog_id, caller_id, for_update=True)

            changed = []
            for name in BLOG_FIELDS:
                value = clean_text(patch.get(name))
                if value:
                    check_length(name, value)
                    setattr(blog, name, value)
                    changed.append(name)

            if changed:
                blog.save(update_fields=changed + ["updated_at"])
        return blog

    def delete(self, blog_id, caller_id):
        """Delete the blog along with all of its comments and replies."""
        with transaction.atomic(using=self.using):
            blog = self.get_owned(blog_id, caller_id, for_update=True)
            pk = blog.pk
            blog.delete()
        logger.info("User %s deleted blog %s", caller_id, pk)
