"""
Smoke tests for the django-blog-api admin registrations.
"""
import pytest

from blog_api.models import Comment, User


@pytest.fixture
def admin_client_for(client, db):
    """Log in a blog_api superuser on the test client."""
    admin = User.objects.create_superuser(email="root@example.com", password="x")
    client.force_login(admin)
    return client


class TestAdmin:
    """Admin pages render for staff."""

    @pytest.mark.parametrize("model", ["user", "blog", "comment"])
    def test_changelist(self, admin_client_for, blog, model):
        response = admin_client_for.get(f"/admin/blog_api/{model}/")
        assert response.status_code == 200

    def test_blog_change_page_shows_comments(self, admin_client_for, blog, bob):
        Comment.objects.create(blog=blog, author=bob, text="nice", position=1)
        response = admin_client_for.get(f"/admin/blog_api/blog/{blog.pk}/change/")
        assert response.status_code == 200
        assert b"nice" in response.content

    def test_regular_user_is_redirected(self, client, alice):
        client.force_login(alice)
        response = client.get("/admin/blog_api/blog/")
        assert response.status_code == 302
