"""Exceptions raised by Google Photos Frame."""

from typing import Any, Optional


class GooglePhotosError(Exception):
    """Base exception for Google Photos operations."""


class AuthenticationError(GooglePhotosError):
    """Raised when authentication fails."""


class ApiError(GooglePhotosError):
    """Raised when Library API calls fail.

    Attributes:
        status: HTTP status returned by the API, 500 when unknown
        server_message: Decoded error payload returned by the API, if any
    """

    def __init__(self, message: str, status: Optional[int] = None, server_message: Any = None):
        super().__init__(message)
        self.status = status or 500
        self.server_message = server_message


class MalformedInputError(GooglePhotosError):
    """Raised when an API payload does not have the shape a model expects."""


class CacheError(GooglePhotosError):
    """Raised for failures of the temporary cache database."""
