"""
Account registration and login.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from .. import exceptions
from ..conf import blog_settings
from ..models import User
from ..tokens import TokenIssuer
from .blogs import clean_text

logger = logging.getLogger(__name__)

EMAIL_MAX_LENGTH = User._meta.get_field("email").max_length


def _is_password(value):
    """Only non-empty strings count as a submitted password."""
    return isinstance(value, str) and value != ""


class AuthService:
    """
    Register users and log them in, issuing a bearer token either way.

    Args:
        tokens: TokenIssuer used to sign tokens
        using: database alias the user table lives in
    """

    def __init__(self, tokens=None, using=None):
        self.tokens = tokens or TokenIssuer()
        self.using = using or blog_settings.DATABASE_ALIAS

    def _users(self):
        return User.objects.db_manager(self.using)

    def register(self, email, password, profile_image):
        """
        Create an account and return ``(token, public_user)``.

        ``profile_image`` is the reference path of an already stored image.
        """
        email = clean_text(email)
        profile_image = clean_text(profile_image)
        if not email or not _is_password(password) or not profile_image:
            raise exceptions.ValidationError("All fields are required")

        try:
            validate_email(email)
        except DjangoValidationError:
            raise exceptions.ValidationError("Enter a valid email address")
        # validate_email allows longer addresses than the column holds.
        if len(email) > EMAIL_MAX_LENGTH:
            raise exceptions.ValidationError("Enter a valid email address")

        users = self._users()
        if users.filter(email=email).exists():
            raise exceptions.DuplicateEmail()

        try:
            with transaction.atomic(using=self.using):
                user = users.create_user(email, password, profile_image=profile_image)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email.
            raise exceptions.DuplicateEmail()

        logger.info("Registered user %s", user.pk)
        return self.tokens.issue(user.pk), user.to_public_dict()

    def login(self, email, password):
        """
        Check credentials and return ``(token, public_user)``.

        Unknown emails and wrong passwords raise the same InvalidCredentials.
        """
        email = clean_text(email)
        if not email or not _is_password(password):
            raise exceptions.ValidationError("Email and password are required")

        user = self._users().filter(email=email).first()
        if user is None:
            # Run the hasher anyway so an unknown email takes as long as a
            # wrong password.
            User().set_password(password)
            logger.warning("Failed login for unknown email")
            raise exceptions.InvalidCredentials()

        if not user.check_password(password) or not user.is_active:
            logger.warning("Failed login for user %s", user.pk)
            raise exceptions.InvalidCredentials()

        logger.info("User %s logged in", user.pk)
        return self.tokens.issue(user.pk), user.to_public_dict()
