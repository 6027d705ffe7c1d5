"""
User model for django-blog-api.

Accounts are identified by email address and carry a profile image
reference. Set ``AUTH_USER_MODEL = "blog_api.User"`` in the host project.
"""
import uuid

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """Manager that creates users keyed by email."""

    def create_user(self, email, password=None, profile_image="", **extra_fields):
        if not email:
            raise ValueError("Users must have an email address")

        # Emails are stored exactly as given; uniqueness is case-sensitive.
        user = self.model(email=email, profile_image=profile_image, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, profile_image="", **extra_fields):
        extra_fields.setdefault("is_admin", True)
        return self.create_user(email, password, profile_image, **extra_fields)


class User(AbstractBaseUser):
    """
    Registered account.

    The password is stored through Django's configured hashers and is
    never included in any serialized view of the user.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=254, unique=True)
    profile_image = models.CharField(
        max_length=255,
        help_text="Reference path of the stored profile image",
    )
    is_active = models.BooleanField(default=True)
    is_admin = models.BooleanField(
        default=False,
        help_text="Grants access to the Django admin site",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["profile_image"]

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.email

    @property
    def is_staff(self):
        return self.is_admin

    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_admin

    def has_module_perms(self, app_label):
        return self.is_active and self.is_admin

    def to_public_dict(self):
        """Return the subset of the user that is safe to send to clients."""
        return {
            "id": str(self.pk),
            "email": self.email,
            "profileImage": self.profile_image,
        }
