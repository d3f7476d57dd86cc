"""Schema mapping registry, Service Management profile and context projection."""

from .profile import ServiceManagementProfile, build_registry, initialize
from .projection import operation_context, overlay, project, project_many
from .registry import ConfigurationError, MappingError, MappingRegistry, TypeMap

__all__ = [
    "ConfigurationError",
    "MappingError",
    "MappingRegistry",
    "ServiceManagementProfile",
    "TypeMap",
    "build_registry",
    "initialize",
    "operation_context",
    "overlay",
    "project",
    "project_many",
]
