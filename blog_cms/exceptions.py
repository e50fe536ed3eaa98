"""
Exceptions raised by the post store.

Each carries the HTTP status the API answers with; the views are the only
place that turns them into responses.
"""


class BlogCMSError(Exception):
    """Base exception for all blog_cms errors."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogCMSError):
    """Raised when post input is missing required fields or is malformed."""

    status_code = 400
    default_message = "Missing required fields"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or {}


class NotFoundError(BlogCMSError):
    """Raised when no post exists for the given id."""

    status_code = 404
    default_message = "Post not found"


class PersistenceError(BlogCMSError):
    """Raised when the database rejects or fails an operation."""

    status_code = 500
    default_message = "Database operation failed"
