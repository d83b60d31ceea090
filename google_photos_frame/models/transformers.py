"""Transformers used to convert raw Library API values into model field values."""

from typing import Any, Callable, List, Optional, Type

from google_photos_frame.utils.core import is_empty, is_undefined_or_null, to_boolean


def boolean_transformer() -> Callable[[Any], bool]:
    """Transform a bool or a "true"/"false" string to a bool, anything else to False."""
    return to_boolean


def identity_transformer() -> Callable[[Any], Any]:
    """Keep the source value as is."""
    return lambda value: value


def default_list_transformer() -> Callable[[Any], List[Any]]:
    """Keep a source list as is, replacing None with an empty list."""
    return lambda values: values if not is_undefined_or_null(values) else []


def default_transformer(model_cls: Type[Any]) -> Callable[[Any], Optional[Any]]:
    """Wrap a source payload in the given model class.

    Empty payloads (None, {}) map to None rather than to a model filled with
    defaults, so an absent nested object stays absent once serialized.

    Args:
        model_cls: Model class to construct from the payload

    Returns:
        Function converting a payload to a model instance
    """

    def transform(source: Any) -> Optional[Any]:
        if is_empty(source):
            return None
        return model_cls(source)

    return transform
