"""
Context projection.

Turns response DTOs into the contexts a command emits: map the response,
stamp the operation id/status from the operation status object, then set
the operation description supplied by the command.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from azsm.mapping.registry import MappingRegistry
from azsm.models.contexts import ManagementOperationContext

__all__ = ["operation_context", "overlay", "project", "project_many"]

C = TypeVar("C", bound=ManagementOperationContext)


def _stamp(
    registry: MappingRegistry,
    context: C,
    operation: Any | None,
    operation_description: str | None,
) -> C:
    if operation is not None:
        registry.map_into(operation, context)
    context.operation_description = operation_description
    return context


def project(
    registry: MappingRegistry,
    response: Any,
    context_type: type[C],
    operation: Any | None = None,
    operation_description: str | None = None,
) -> C | None:
    """Project one response into a context_type instance.

    Args:
        registry: Registry holding the (type(response), context_type) map
        response: Response DTO (None projects to None)
        context_type: Context class to build
        operation: Operation status/response whose id and status are stamped on
        operation_description: Name of the command producing the context

    Returns:
        The populated context

    Raises:
        ConfigurationError: If either pair is not registered
        MappingError: If a field fails to convert
    """
    context = registry.map(response, context_type)
    if context is None:
        return None
    return _stamp(registry, context, operation, operation_description)


def project_many(
    registry: MappingRegistry,
    items: Iterable[Any] | None,
    context_type: type[C],
    operation: Any | None = None,
    operation_description: str | None = None,
) -> list[C | None]:
    """Project each item in order; every context gets the same operation metadata.

    The result has one entry per item: a None item stays None in its slot.
    """
    if items is None:
        return []
    return [
        project(registry, item, context_type, operation, operation_description) for item in items
    ]


def overlay(registry: MappingRegistry, source: Any, context: C) -> C:
    """Map a secondary DTO (e.g. service properties) onto an existing context."""
    return registry.map_into(source, context)


def operation_context(
    registry: MappingRegistry,
    operation: Any,
    operation_description: str | None = None,
) -> ManagementOperationContext:
    """Context for commands whose only output is the operation itself."""
    context = registry.map(operation, ManagementOperationContext)
    if context is None:
        context = ManagementOperationContext()
    context.operation_description = operation_description
    return context
