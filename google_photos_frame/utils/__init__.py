"""Utility functions for Google Photos Frame."""

from .auth import authenticate_google_photos, get_credentials, remove_credentials
from .core import is_boolean, is_empty, is_function, is_undefined_or_null, self_or_default, to_boolean

__all__ = [
    "authenticate_google_photos",
    "get_credentials",
    "remove_credentials",
    "is_boolean",
    "is_empty",
    "is_function",
    "is_undefined_or_null",
    "self_or_default",
    "to_boolean",
]
