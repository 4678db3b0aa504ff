"""Structured exception types for DevEvent.

Every exception carries the HTTP status and error code it maps to, so the
API layer needs a single handler for all of them.

Usage:
    from devevent.exceptions import EventNotFoundException

    # In service layer
    if event is None:
        raise EventNotFoundException(slug)
"""

from typing import Any

from devevent.models.errors import ErrorCode


class EventsException(Exception):
    """Base exception for DevEvent.

    Attributes:
        error_code: ErrorCode enum value for API responses
        status_code: HTTP status code to return
        message: Human-readable error message
        details: Extra diagnostics, only exposed in development
    """

    error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: Any | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationException(EventsException):
    """Raised when required configuration is missing or invalid."""

    error_code = ErrorCode.CONFIGURATION_ERROR
    status_code = 500


class DatabaseConnectionException(EventsException):
    """Raised when the database cannot be reached. Retryable."""

    error_code = ErrorCode.DATABASE_ERROR
    status_code = 500


class StoreException(EventsException):
    """Raised when a query or write against the store fails."""

    error_code = ErrorCode.DATABASE_ERROR
    status_code = 500


class ValidationException(EventsException):
    """Raised when request input is malformed."""

    error_code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class InvalidSlugException(ValidationException):
    """Raised when a slug is missing or does not match [a-z0-9-]+."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_SLUG_FORMAT) -> None:
        super().__init__(message)
        self.error_code = error_code


class ImageRequiredException(ValidationException):
    """Raised when an event form arrives without an image file."""

    error_code = ErrorCode.IMAGE_REQUIRED

    def __init__(self) -> None:
        super().__init__("Image file is required!")


class EventNotFoundException(EventsException):
    """Raised when an event lookup finds nothing."""

    error_code = ErrorCode.EVENT_NOT_FOUND
    status_code = 404


class ImageNotFoundException(EventsException):
    """Raised when a locally stored image does not exist."""

    error_code = ErrorCode.IMAGE_NOT_FOUND
    status_code = 404


class UploadException(EventsException):
    """Raised when the image upload provider fails."""

    error_code = ErrorCode.UPLOAD_ERROR
    status_code = 500
