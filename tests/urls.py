"""
URL configuration for the django-blog-api test suite.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("blog_api.urls")),
]
