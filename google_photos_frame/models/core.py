"""Declarative mapping of Google Photos Library API payloads onto models.

Every model declares an ordered tuple of field descriptors. Construction runs
each descriptor through init_field, which reads the raw payload, applies
defaults, transformers and list processors, and records aliases. The generic
helpers below then answer emptiness and JSON serialization for any model by
walking those same descriptors.
"""

import weakref
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    Tuple,
    Type,
    Union,
    runtime_checkable,
)

from google_photos_frame.exceptions import MalformedInputError
from google_photos_frame.models.transformers import default_transformer
from google_photos_frame.utils.core import (
    is_empty,
    is_function,
    is_undefined_or_null,
    self_or_default,
)

# Bookkeeping attributes never written to JSON
SKIP_FIELDS = ("_isEmpty", "_name", "_parent", "aliases", "errors", "keys")


@runtime_checkable
class Serializable(Protocol):
    """Object that can render itself as a JSON compatible structure."""

    def to_json(self) -> Any:
        ...


@runtime_checkable
class Validatable(Protocol):
    """Object that can tell whether it should be kept in a processed list."""

    def is_valid(self) -> bool:
        ...


@runtime_checkable
class PostConstructable(Protocol):
    """Object with a hook fired once it is attached to its parent model."""

    def post_construct(self) -> None:
        ...


@dataclass(frozen=True)
class Scalar:
    """Single value field, optionally converted by a transformer."""

    name: str
    alias: Optional[str] = None
    default: Any = None
    transform: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class Nested:
    """Field holding a single nested model."""

    name: str
    schema: Type["Model"]
    alias: Optional[str] = None


@dataclass(frozen=True)
class ListOf:
    """Field holding a list of nested models; invalid elements are dropped."""

    name: str
    schema: Type["Model"]
    alias: Optional[str] = None


@dataclass(frozen=True)
class Derived:
    """Field computed from the other fields once they are initialized.

    Derived fields are serialized but are not part of the model keys.
    """

    name: str
    compute: Callable[["Model"], Any]
    alias: Optional[str] = None


FieldSpec = Union[Scalar, Nested, ListOf, Derived]


def init_field(
    target: Any,
    key: str,
    source: Any,
    default_value: Any = None,
    transformer: Optional[Callable[[Any], Any]] = None,
    processor: Optional[Callable[[Any], Any]] = None,
    alias: Optional[str] = None,
) -> None:
    """Initialize one field of the target from the source payload.

    Args:
        target: Object to set the field on
        key: Name of the field on the target
        source: Payload to read the value from
        default_value: Value used when the source is empty or lacks the field
        transformer: Function converting the raw source value
        processor: Function applied to each element when the field is a list
        alias: Name of the field in the source when it differs from key

    Raises:
        MalformedInputError: If a non-empty source is not a mapping, or a
            processed field is not a list
    """
    if is_undefined_or_null(alias):
        alias = key
    if alias != key:
        if getattr(target, "aliases", None) is None:
            target.aliases = {}
        target.aliases[key] = alias

    if is_empty(source):
        value = default_value
    elif not isinstance(source, Mapping):
        raise MalformedInputError(
            f"Cannot read field '{alias}' from a {type(source).__name__} payload"
        )
    elif is_undefined_or_null(processor):
        value = _transform(transformer, source, alias, key, default_value)
    else:
        value = _process_list(processor, source, alias, key, default_value)

    setattr(target, key, value)

    if isinstance(value, Model):
        value._parent = weakref.ref(target)
        value._name = alias
        if isinstance(value, PostConstructable):
            value.post_construct()


def _lookup(source: Mapping, alias: str, key: str) -> Any:
    return self_or_default(source.get(alias), source.get(key))


def _transform(
    transformer: Optional[Callable[[Any], Any]],
    source: Mapping,
    alias: str,
    key: str,
    default_value: Any,
) -> Any:
    """Resolve a single value, letting the transformer handle missing values itself."""
    if is_function(transformer):
        return transformer(_lookup(source, alias, key))

    return self_or_default(_lookup(source, alias, key), default_value)


def _process_list(
    processor: Callable[[Any], Any],
    source: Mapping,
    alias: str,
    key: str,
    default_value: Any,
) -> List[Any]:
    values = list(default_value) if not is_undefined_or_null(default_value) else []
    candidates = _lookup(source, alias, key)
    if is_undefined_or_null(candidates):
        return values

    if not isinstance(candidates, (list, tuple)):
        raise MalformedInputError(
            f"Expected a list for field '{alias}', got {type(candidates).__name__}"
        )

    for candidate in candidates:
        processed = _process_element(processor, candidate)
        if not is_undefined_or_null(processed):
            values.append(processed)

    return values


def _process_element(processor: Callable[[Any], Any], value: Any) -> Any:
    processed = processor(value)
    if is_undefined_or_null(processed):
        return None
    if isinstance(processed, Validatable) and not processed.is_valid():
        return None
    return processed


def resolve_field(target: "Model", spec: FieldSpec, source: Any) -> None:
    """Initialize the field described by spec on the target."""
    if isinstance(spec, Scalar):
        init_field(target, spec.name, source, spec.default, spec.transform, None, spec.alias)
    elif isinstance(spec, Nested):
        init_field(
            target, spec.name, source, None, default_transformer(spec.schema), None, spec.alias
        )
    elif isinstance(spec, ListOf):
        init_field(
            target, spec.name, source, [], None, default_transformer(spec.schema), spec.alias
        )
    elif isinstance(spec, Derived):
        if spec.alias and spec.alias != spec.name:
            target.aliases[spec.name] = spec.alias
        setattr(target, spec.name, spec.compute(target))
    else:
        raise TypeError(f"Unknown field descriptor: {spec!r}")


def is_model_empty(model: Any) -> bool:
    """Check if every keyed field of the model is empty.

    A model without keys is reported as not empty.
    """
    keys = getattr(model, "keys", None)
    if is_empty(keys):
        return False

    return all(is_empty(getattr(model, key, None)) for key in keys)


def get_json_object(value: Any) -> Any:
    """Return the JSON form of a model, or the value itself if it has none."""
    if isinstance(value, Serializable):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    return value


def convert_to_json(model: Any, remove_null: bool = True) -> Optional[Dict[str, Any]]:
    """Convert a model to a JSON compatible dict.

    Field names are replaced by their aliases. List fields are compacted,
    dropping elements that serialize to None.

    Args:
        model: Model to convert
        remove_null: Omit fields whose value is None

    Returns:
        The JSON dict, or None when remove_null is set and no field remains
    """
    aliases = getattr(model, "aliases", None) or {}
    json_object: Dict[str, Any] = {}

    for name in _serialized_names(model):
        key_to_use = aliases.get(name, name)
        value = get_json_object(getattr(model, name, None))

        if isinstance(value, (list, tuple)):
            elements = (get_json_object(element) for element in value)
            json_object[key_to_use] = [element for element in elements if element is not None]
        elif not remove_null or value is not None:
            json_object[key_to_use] = value

    if remove_null and is_empty(json_object):
        return None
    return json_object


def _serialized_names(model: Any) -> List[str]:
    if isinstance(model, Model):
        return [spec.name for spec in type(model).fields]

    # Plain objects populated through init_field
    return [name for name in vars(model) if name not in SKIP_FIELDS]


class Model:
    """Base class for models mapped from Library API payloads.

    Subclasses declare their schema in the fields tuple; everything else is
    derived from it.
    """

    fields: Tuple[FieldSpec, ...] = ()

    def __init__(self, source: Optional[Mapping] = None):
        self.aliases: Dict[str, str] = {}
        self._parent: Optional[weakref.ref] = None
        self._name: Optional[str] = None

        for spec in type(self).fields:
            if not isinstance(spec, Derived):
                resolve_field(self, spec, source)

        for spec in type(self).fields:
            if isinstance(spec, Derived):
                resolve_field(self, spec, source)

    @property
    def keys(self) -> Tuple[str, ...]:
        """Names of the fields that define emptiness for this model."""
        return tuple(
            spec.name for spec in type(self).fields if not isinstance(spec, Derived)
        )

    @property
    def parent(self) -> Optional["Model"]:
        """Model this instance is nested in, if it is still alive."""
        if self._parent is None:
            return None
        return self._parent()

    def is_empty(self) -> bool:
        """Check if every keyed field of the model is empty."""
        return is_model_empty(self)

    def to_json(self, remove_null: bool = True) -> Optional[Dict[str, Any]]:
        """Convert the model to a JSON compatible dict, or None if nothing remains."""
        return convert_to_json(self, remove_null)

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in self.keys)
        return f"{type(self).__name__}({values})"
