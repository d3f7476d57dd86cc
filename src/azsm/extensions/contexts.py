"""Build extension contexts from resolved (role, extension) pairs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from azsm.extensions.public_config import get_public_config_value
from azsm.extensions.resolver import resolve_extensions
from azsm.mapping.projection import project
from azsm.mapping.registry import MappingRegistry
from azsm.models.compute import ExtensionConfiguration, HostedServiceExtension
from azsm.models.contexts import ExtensionContext, RemoteDesktopExtensionContext

__all__ = [
    "EXPIRATION_ELEMENT",
    "REMOTE_DESKTOP_NAMESPACE",
    "REMOTE_DESKTOP_TYPE",
    "USER_NAME_ELEMENT",
    "extension_contexts",
    "remote_desktop_extension_contexts",
]

REMOTE_DESKTOP_NAMESPACE = "Microsoft.Windows.Azure.Extensions"
REMOTE_DESKTOP_TYPE = "RDP"
USER_NAME_ELEMENT = "UserName"
EXPIRATION_ELEMENT = "Expiration"


def extension_contexts(
    registry: MappingRegistry,
    role_names: Iterable[str | None],
    extensions: Iterable[HostedServiceExtension] | None,
    extension_configuration: ExtensionConfiguration | None,
    namespace: str | None = None,
    extension_type: str | None = None,
    operation: Any | None = None,
    operation_description: str | None = None,
) -> list[ExtensionContext]:
    """One ExtensionContext per active (role, extension) pair."""
    contexts = []
    for role, extension in resolve_extensions(
        role_names, extensions, extension_configuration, namespace, extension_type
    ):
        context = project(registry, extension, ExtensionContext, operation, operation_description)
        context.role = role
        contexts.append(context)
    return contexts


def remote_desktop_extension_contexts(
    registry: MappingRegistry,
    role_names: Iterable[str | None],
    extensions: Iterable[HostedServiceExtension] | None,
    extension_configuration: ExtensionConfiguration | None,
    operation: Any | None = None,
    operation_description: str | None = None,
) -> list[RemoteDesktopExtensionContext]:
    """One RemoteDesktopExtensionContext per active RDP extension and role.

    User name and expiration come from the extension's public configuration
    and are None when it does not carry them.
    """
    contexts = []
    for role, extension in resolve_extensions(
        role_names,
        extensions,
        extension_configuration,
        REMOTE_DESKTOP_NAMESPACE,
        REMOTE_DESKTOP_TYPE,
    ):
        context = project(
            registry, extension, RemoteDesktopExtensionContext, operation, operation_description
        )
        context.role = role
        context.user_name = get_public_config_value(extension, USER_NAME_ELEMENT)
        context.expiration = get_public_config_value(extension, EXPIRATION_ELEMENT)
        contexts.append(context)
    return contexts
