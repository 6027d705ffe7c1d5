"""
Django admin configuration for blog_api.
"""
from django.contrib import admin

from .models import User, Blog, Comment, Reply


class CommentInline(admin.TabularInline):
    """Read-only view of a blog's comments."""

    model = Comment
    extra = 0
    fields = ["position", "author", "text", "created_at"]
    readonly_fields = ["position", "author", "text", "created_at"]
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


class ReplyInline(admin.TabularInline):
    model = Reply
    extra = 0
    fields = ["position", "author", "text", "created_at"]
    readonly_fields = ["position", "author", "text", "created_at"]
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["email", "is_active", "is_admin", "created_at", "last_login"]
    list_filter = ["is_active", "is_admin"]
    search_fields = ["email"]
    fields = ["email", "profile_image", "is_active", "is_admin", "last_login", "created_at"]
    readonly_fields = ["last_login", "created_at"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ["title", "author", "comment_count", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["title", "description", "author__email"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    readonly_fields = ["created_at", "updated_at"]
    inlines = [CommentInline]

    @admin.display(description="Comments")
    def comment_count(self, obj):
        return obj.comments.count()


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "author", "blog", "created_at"]
    search_fields = ["text", "author__email"]
    raw_id_fields = ["blog", "author"]
    readonly_fields = ["position", "created_at"]
    inlines = [ReplyInline]
