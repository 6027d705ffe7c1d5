"""
Shared fixtures for django-blog-api tests.
"""
import pytest

from blog_api.models import Blog, User


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploads in a per-test directory."""
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return tmp_path / "media"


@pytest.fixture
def alice(db):
    """Create the first test user."""
    return User.objects.create_user(
        email="alice@example.com",
        password="pw123",
        profile_image="/media/uploads/alice.png",
    )


@pytest.fixture
def bob(db):
    """Create a second, unrelated user."""
    return User.objects.create_user(
        email="bob@example.com",
        password="hunter2",
        profile_image="/media/uploads/bob.png",
    )


@pytest.fixture
def blog(db, alice):
    """Create a blog owned by alice."""
    return Blog.objects.create(
        title="Hi",
        description="d",
        content="c",
        image="/media/uploads/cover.png",
        author=alice,
    )
