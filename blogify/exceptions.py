"""
Error types raised by blogify services.

Each exception carries the HTTP status the API layer answers with, so
services can raise without knowing about responses.
"""


class BlogifyError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500
    default_message = "Server Error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogifyError):
    """A payload is missing required fields or carries invalid values."""

    status_code = 400
    default_message = "Validation failed"


class AuthenticationError(BlogifyError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = "Authentication required"


class PermissionDeniedError(BlogifyError):
    status_code = 403
    default_message = "You do not have permission to perform this action"


class NotFoundError(BlogifyError):
    status_code = 404
    default_message = "Not found"


class TagInUseError(BlogifyError):
    """A tag cannot be removed while content still references it."""

    status_code = 409
    default_message = "Tag is in use"
