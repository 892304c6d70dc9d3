from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class ConflictError(UserError):
    """Raised when a write would collide with an existing document."""


class PayloadTooLargeError(ValidationError):
    """Raised when an uploaded payload exceeds the allowed size."""


class UpstreamError(Exception):
    """Raised when an external service (image host) fails.

    The message is shown to the client, details belong in the logs.
    """

    def __init__(self, message: str = "Upstream service failed") -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when required server configuration is missing."""
