"""Extension resolution: which extensions are active on which deployment roles."""

from .config_builder import ExtensionConfigurationBuilder
from .contexts import (
    REMOTE_DESKTOP_NAMESPACE,
    REMOTE_DESKTOP_TYPE,
    extension_contexts,
    remote_desktop_extension_contexts,
)
from .public_config import PublicConfigurationError, get_public_config_value
from .resolver import candidate_roles, check_namespace_type, resolve_extensions

__all__ = [
    "REMOTE_DESKTOP_NAMESPACE",
    "REMOTE_DESKTOP_TYPE",
    "ExtensionConfigurationBuilder",
    "PublicConfigurationError",
    "candidate_roles",
    "check_namespace_type",
    "extension_contexts",
    "get_public_config_value",
    "remote_desktop_extension_contexts",
    "resolve_extensions",
]
