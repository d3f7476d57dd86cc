"""
Dict conversion for azsm dataclass models.

Every DTO and context in azsm is a plain dataclass. This module turns them
into plain dicts (for JSON output) and builds them back from dicts (for
recorded Service Management responses), driven by the dataclass field
annotations.

Philosophy:
- Zero dependencies on other azsm modules
- Annotations are the single source of truth for nested types
- Unknown keys are ignored, missing keys keep the field default
"""

from __future__ import annotations

import base64
import dataclasses
import ipaddress
import types
import typing
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

__all__ = ["DictModel", "ModelDecodeError", "decode_value", "encode_value", "field_types"]

T = TypeVar("T", bound="DictModel")

_IP_TYPES = (ipaddress.IPv4Address, ipaddress.IPv6Address)

_field_type_cache: dict[type, dict[str, Any]] = {}


class ModelDecodeError(ValueError):
    """Raised when a plain value cannot be decoded into a model field."""

    def __init__(self, model: str, field: str | None, reason: str):
        self.model = model
        self.field = field
        self.reason = reason
        location = f"{model}.{field}" if field else model
        super().__init__(f"Invalid value for {location}: {reason}")


def field_types(cls: type) -> dict[str, Any]:
    """Return resolved annotations for the dataclass fields of cls."""
    cached = _field_type_cache.get(cls)
    if cached is not None:
        return cached

    hints = get_type_hints(cls)
    resolved = {f.name: hints[f.name] for f in dataclasses.fields(cls)}
    _field_type_cache[cls] = resolved
    return resolved


def unwrap_optional(hint: Any) -> Any:
    """Strip None from an Optional/union annotation.

    Returns the single remaining type, or the union itself when more than
    one non-None member remains (e.g. IPv4Address | IPv6Address).
    """
    origin = get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
        return typing.Union[tuple(members)]
    return hint


def _is_ip_union(hint: Any) -> bool:
    origin = get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        return all(arg in _IP_TYPES for arg in get_args(hint))
    return hint in _IP_TYPES


def decode_value(hint: Any, value: Any) -> Any:
    """Convert a plain value into the type described by hint."""
    if value is None:
        return None

    hint = unwrap_optional(hint)
    if hint is Any:
        return value

    if _is_ip_union(hint):
        if isinstance(value, _IP_TYPES):
            return value
        return ipaddress.ip_address(value)

    origin = get_origin(hint)
    if origin is list:
        (element,) = get_args(hint) or (Any,)
        return [decode_value(element, item) for item in value]
    if origin is dict:
        return dict(value)

    if not isinstance(hint, type):
        return value

    element_type = getattr(hint, "element_type", None)
    if issubclass(hint, list) and element_type is not None:
        return hint(decode_value(element_type, item) for item in value)
    if issubclass(hint, DictModel):
        return value if isinstance(value, hint) else hint.from_dict(value)
    if issubclass(hint, Enum):
        return value if isinstance(value, hint) else hint(value)
    if hint is datetime and isinstance(value, str):
        # fromisoformat accepts a trailing Z only from Python 3.11
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    if hint is bytes and isinstance(value, str):
        return base64.b64decode(value)
    return value


def encode_value(value: Any) -> Any:
    """Convert a model value into JSON-compatible plain data."""
    if value is None or isinstance(value, (bool, int, float, str)) and not isinstance(value, Enum):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: encode_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, _IP_TYPES):
        return str(value)
    if isinstance(value, dict):
        return {str(k): encode_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return str(value)


class DictModel:
    """Mixin giving a dataclass from_dict/to_dict."""

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Create from a plain dictionary (snake_case keys).

        Raises:
            ModelDecodeError: If data is not a mapping or a field value cannot
                be decoded. Errors in nested models name the innermost field.
        """
        if not isinstance(data, dict):
            raise ModelDecodeError(
                cls.__name__, None, f"expected a mapping, got {type(data).__name__}"
            )

        kwargs = {}
        for name, hint in field_types(cls).items():
            if name not in data:
                continue
            try:
                kwargs[name] = decode_value(hint, data[name])
            except ModelDecodeError:
                raise
            except (ValueError, TypeError) as e:
                raise ModelDecodeError(cls.__name__, name, str(e)) from e
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return encode_value(self)
