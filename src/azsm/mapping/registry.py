"""
Type-pair mapping registry.

A MappingRegistry holds one TypeMap per (source type, target type) pair.
A TypeMap copies same-named fields automatically and lets callers override
individual target fields with a resolver (rename, coercion, derived value).
Nested dataclasses and typed collections are converted according to the
target field's annotation, recursing through the registry.

Public API:
    MappingRegistry: create_map, freeze, map, map_into, map_list
    TypeMap: for_member, rename
    ConfigurationError: unregistered or invalid type pair
    MappingError: a field value failed to convert
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, get_args, get_origin

from azsm.models.base import field_types, unwrap_optional

__all__ = ["ConfigurationError", "MappingError", "MappingRegistry", "TypeMap"]

T = TypeVar("T")

Resolver = Callable[[Any], Any]


class ConfigurationError(Exception):
    """Raised when a type map is missing, duplicated or invalid."""

    pass


class MappingError(Exception):
    """Raised when a source value cannot be converted for a target field."""

    def __init__(self, field: str, source_type: type | str, reason: str = ""):
        self.field = field
        self.source_type = source_type if isinstance(source_type, str) else source_type.__name__
        self.reason = reason
        message = f"Cannot map field '{field}' from {self.source_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TypeMap:
    """Mapping rules from one source type to one target type."""

    def __init__(
        self,
        registry: MappingRegistry,
        source_type: type,
        target_type: type,
        auto_copy: bool = True,
    ):
        self.registry = registry
        self.source_type = source_type
        self.target_type = target_type
        self.auto_copy = auto_copy
        self._target_hints = field_types(target_type)
        self._source_fields = {f.name for f in dataclasses.fields(source_type)}
        self._members: dict[str, Resolver] = {}

    @property
    def members(self) -> dict[str, Resolver]:
        return dict(self._members)

    def for_member(self, target_field: str, resolver: Resolver) -> TypeMap:
        """Compute target_field with resolver(source).

        Raises:
            ConfigurationError: If the target type has no such field or the
                registry is frozen
        """
        self.registry._ensure_mutable()
        if target_field not in self._target_hints:
            raise ConfigurationError(
                f"{self.target_type.__name__} has no field '{target_field}' "
                f"(mapping from {self.source_type.__name__})"
            )
        if target_field in self._members:
            raise ConfigurationError(
                f"Field '{target_field}' already configured for "
                f"{self.source_type.__name__} -> {self.target_type.__name__}"
            )
        self._members[target_field] = resolver
        return self

    def rename(self, target_field: str, source_field: str) -> TypeMap:
        """Fill target_field from a differently named source field."""
        if source_field not in self._source_fields:
            raise ConfigurationError(
                f"{self.source_type.__name__} has no field '{source_field}'"
            )
        hint = self._target_hints.get(target_field)
        registry = self.registry
        return self.for_member(
            target_field, lambda source: registry.convert(getattr(source, source_field), hint)
        )

    def apply(self, source: Any, target: Any) -> None:
        """Write every mapped field of source onto target."""
        for name, hint in self._target_hints.items():
            resolver = self._members.get(name)
            try:
                if resolver is not None:
                    value = resolver(source)
                elif self.auto_copy and name in self._source_fields:
                    value = self.registry.convert(getattr(source, name), hint)
                else:
                    continue
            except (ValueError, TypeError) as e:
                raise MappingError(name, self.source_type, str(e)) from e
            setattr(target, name, value)


class MappingRegistry:
    """Registry of type maps; read-only once frozen."""

    def __init__(self) -> None:
        self._maps: dict[tuple[type, type], TypeMap] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationError("Mapping registry is frozen; no further maps can be added")

    def create_map(self, source_type: type, target_type: type, auto_copy: bool = True) -> TypeMap:
        """Register a new (source_type, target_type) map.

        Args:
            source_type: Dataclass mapped from
            target_type: Dataclass mapped to (must be constructible with no arguments)
            auto_copy: Copy same-named fields that have no explicit rule

        Returns:
            The new TypeMap, for chaining member rules

        Raises:
            ConfigurationError: If the pair exists, the registry is frozen, or
                either type is not a dataclass
        """
        self._ensure_mutable()
        for cls in (source_type, target_type):
            if not dataclasses.is_dataclass(cls):
                raise ConfigurationError(f"{cls.__name__} is not a dataclass")

        key = (source_type, target_type)
        if key in self._maps:
            raise ConfigurationError(
                f"Mapping {source_type.__name__} -> {target_type.__name__} already registered"
            )

        type_map = TypeMap(self, source_type, target_type, auto_copy=auto_copy)
        self._maps[key] = type_map
        return type_map

    def freeze(self) -> None:
        self._frozen = True

    def has_map(self, source_type: type, target_type: type) -> bool:
        return (source_type, target_type) in self._maps

    def registered_pairs(self) -> list[tuple[type, type]]:
        return list(self._maps)

    def find_map(self, source_type: type, target_type: type) -> TypeMap:
        """Return the map for an exact type pair.

        Raises:
            ConfigurationError: If no map is registered for the pair
        """
        type_map = self._maps.get((source_type, target_type))
        if type_map is None:
            raise ConfigurationError(
                f"No mapping registered from {source_type.__name__} to {target_type.__name__}"
            )
        return type_map

    def map(self, source: Any, target_type: type[T]) -> T | None:
        """Map source into a new target_type instance (None maps to None)."""
        if source is None:
            return None
        type_map = self.find_map(type(source), target_type)
        target = target_type()
        type_map.apply(source, target)
        return target

    def map_into(self, source: Any, target: T) -> T:
        """Map source onto an existing target, leaving unmapped fields alone."""
        if source is not None:
            self.find_map(type(source), type(target)).apply(source, target)
        return target

    def map_list(self, sources: Iterable[Any] | None, target_type: type[T]) -> list[T]:
        """Map each source element in order."""
        if sources is None:
            return []
        return [self.map(item, target_type) for item in sources]

    def convert(self, value: Any, hint: Any) -> Any:
        """Convert value to the shape described by a target field annotation."""
        if value is None or hint is None:
            return value

        hint = unwrap_optional(hint)
        origin = get_origin(hint)
        if origin is list:
            args = get_args(hint)
            element = args[0] if args else Any
            return [self.convert(item, element) for item in value]
        if origin is dict:
            return dict(value)
        if not isinstance(hint, type):
            return value

        element_type = getattr(hint, "element_type", None)
        if issubclass(hint, list) and element_type is not None:
            return hint(self.convert(item, element_type) for item in value)
        if dataclasses.is_dataclass(hint) and not isinstance(value, hint):
            return self.map(value, hint)
        return value
