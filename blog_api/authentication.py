"""
Bearer token gate for protected API views.

Authentication only: per-blog ownership is checked by the repository.
"""
from . import exceptions

BEARER_SCHEME = "bearer"


def get_bearer_token(request):
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns None when the header is missing, uses another scheme or
    carries no token.
    """
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        return None
    return token


def authenticate_request(request, issuer):
    """
    Verify the request's bearer token and attach the caller's id.

    Raises Unauthorized when no token is present and Forbidden when it
    fails verification. On success ``request.user_id`` holds the id.
    """
    token = get_bearer_token(request)
    if token is None:
        raise exceptions.Unauthorized()

    request.user_id = issuer.verify(token)
    return request.user_id
