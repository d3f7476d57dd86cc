"""
Extension resolution.

Decides, for every (role, extension) pair of a deployment, whether the
extension is active on that role. Candidate roles are the deployment's named
roles in order followed by the wildcard role; a pair is kept when the
extension matches the namespace/type filter and the deployment's extension
configuration associates it with the role.
"""

from __future__ import annotations

from collections.abc import Iterable

from azsm.extensions.config_builder import ExtensionConfigurationBuilder
from azsm.models.compute import ExtensionConfiguration, ExtensionRole, HostedServiceExtension

__all__ = ["candidate_roles", "check_namespace_type", "resolve_extensions"]


def check_namespace_type(
    extension: HostedServiceExtension | None,
    namespace: str | None,
    extension_type: str | None,
) -> bool:
    """Whether extension has the given provider namespace and type.

    A None filter matches any value.
    """
    if extension is None:
        return False
    if namespace is not None and extension.provider_namespace != namespace:
        return False
    if extension_type is not None and extension.type != extension_type:
        return False
    return True


def candidate_roles(role_names: Iterable[str | None]) -> list[ExtensionRole]:
    """Named roles in deployment order (duplicates and blanks dropped), then the wildcard."""
    roles: list[ExtensionRole] = []
    for name in role_names:
        role = ExtensionRole(name)
        if role.default or role in roles:
            continue
        roles.append(role)
    roles.append(ExtensionRole())
    return roles


def resolve_extensions(
    role_names: Iterable[str | None],
    extensions: Iterable[HostedServiceExtension] | None,
    extension_configuration: ExtensionConfiguration | ExtensionConfigurationBuilder | None,
    namespace_filter: str | None,
    type_filter: str | None,
) -> list[tuple[ExtensionRole, HostedServiceExtension]]:
    """Return the (role, extension) pairs active in a deployment.

    Args:
        role_names: Role names of the deployment, in deployment order
        extensions: Extensions installed on the hosted service
        extension_configuration: The deployment's role/extension associations
        namespace_filter: Required provider namespace (None matches any)
        type_filter: Required extension type (None matches any)

    Returns:
        Pairs ordered by role (named roles first, wildcard last), then by
        extension order
    """
    extension_list = list(extensions or [])
    if not extension_list:
        return []

    if isinstance(extension_configuration, ExtensionConfigurationBuilder):
        builder = extension_configuration
    else:
        builder = ExtensionConfigurationBuilder(extension_configuration)

    matching = [
        extension
        for extension in extension_list
        if check_namespace_type(extension, namespace_filter, type_filter)
    ]

    pairs: list[tuple[ExtensionRole, HostedServiceExtension]] = []
    for role in candidate_roles(role_names):
        for extension in matching:
            if builder.exists(role, extension.id):
                pairs.append((role, extension))
    return pairs
