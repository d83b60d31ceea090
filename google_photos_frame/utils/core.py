"""Primitive predicates shared by the model layer."""

from collections.abc import Mapping, Sequence
from typing import Any


def is_undefined_or_null(value: Any) -> bool:
    """Check if the provided value is None."""
    return value is None


def is_function(value: Any) -> bool:
    """Check if the provided value can be called."""
    return value is not None and callable(value)


def is_boolean(value: Any) -> bool:
    """Check if the provided value is a boolean or a "true"/"false" string.

    Args:
        value: Value to check

    Returns:
        True if the value is a bool or a case-insensitive "true"/"false" string
    """
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return value.lower() in ("true", "false")
    return False


def is_empty(value: Any, trim: bool = False) -> bool:
    """Check if the provided value is None or empty.

    Args:
        value: Value to check
        trim: Strip whitespace from strings before checking

    Returns:
        True for None, empty sequences (lists, tuples, bytes, ranges), empty
        (optionally trimmed) strings, mappings without keys and objects whose
        is_empty() returns True
    """
    if is_undefined_or_null(value):
        return True

    if isinstance(value, str):
        if trim:
            value = value.strip()
        return value == ""

    if isinstance(value, (Sequence, Mapping)):
        return len(value) == 0

    is_empty_method = getattr(value, "is_empty", None)
    if is_function(is_empty_method):
        return bool(is_empty_method())

    return False


def self_or_default(value: Any, default: Any) -> Any:
    """Return the value unless it is None, in which case return the default."""
    if is_undefined_or_null(value):
        return default
    return value


def to_boolean(value: Any) -> bool:
    """Convert a bool or a "true"/"false" string to a bool.

    Any other value, None included, converts to False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False
