"""
Error kinds raised by the blog API services.

Each error carries the HTTP status it maps to; views turn them into
``{"message": ...}`` responses.
"""


class ApiError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid input"


class DuplicateEmail(ApiError):
    status_code = 400
    default_message = "User already exists"


class InvalidCredentials(ApiError):
    """Login failed. Unknown email and wrong password look the same."""

    status_code = 400
    default_message = "Invalid credentials"


class Unauthorized(ApiError):
    """No bearer token was presented."""

    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ApiError):
    """Bad or expired token, or the caller does not own the resource."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"
