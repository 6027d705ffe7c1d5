"""
URL configuration for django-blog-api.

Include in your project urls.py:

    path('api/', include('blog_api.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_api"

urlpatterns = [
    # Accounts
    path("users/register", views.RegisterView.as_view(), name="register"),
    path("users/login", views.LoginView.as_view(), name="login"),

    # Blog CRUD
    path("blogs", views.BlogListView.as_view(), name="blog_list"),
    path("blogs/<str:pk>", views.BlogDetailView.as_view(), name="blog_detail"),

    # Discussion
    path("blogs/<str:pk>/comments", views.CommentCreateView.as_view(), name="comment_create"),
    path(
        "blogs/<str:blog_pk>/comments/<str:comment_pk>/replies",
        views.ReplyCreateView.as_view(),
        name="reply_create",
    ),
]
