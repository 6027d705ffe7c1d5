"""
Bearer token issuing and verification.

Tokens are HS256 JWTs whose payload carries only the user id (``sub``),
the issue time and the expiry.
"""
import logging
from datetime import datetime, timedelta, timezone

import jwt

from . import exceptions
from .conf import blog_settings

logger = logging.getLogger(__name__)


class TokenIssuer:
    """
    Sign and verify time-bounded bearer tokens.

    Args:
        secret: signing key, defaults to the TOKEN_SECRET setting
        ttl: lifetime as seconds or timedelta, defaults to TOKEN_TTL
        algorithm: JWT algorithm, defaults to TOKEN_ALGORITHM
    """

    def __init__(self, secret=None, ttl=None, algorithm=None):
        self.secret = secret or blog_settings.TOKEN_SECRET
        self.algorithm = algorithm or blog_settings.TOKEN_ALGORITHM
        if ttl is None:
            ttl = blog_settings.TOKEN_TTL
        if not isinstance(ttl, timedelta):
            ttl = timedelta(seconds=ttl)
        self.ttl = ttl

    def issue(self, user_id):
        """Return a signed token for ``user_id``."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token):
        """
        Decode ``token`` and return the user id it was issued for.

        Raises Forbidden when the signature, expiry or claims are invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired bearer token")
            raise exceptions.Forbidden()
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected invalid bearer token: %s", exc)
            raise exceptions.Forbidden()
        return payload["sub"]
