"""Per-deployment record of which extension ids apply to which roles."""

from __future__ import annotations

from azsm.models.compute import ExtensionConfiguration, ExtensionRole

__all__ = ["ExtensionConfigurationBuilder"]


class ExtensionConfigurationBuilder:
    """Role/extension associations of one deployment.

    Built from the ExtensionConfiguration returned with the deployment.
    Extension ids listed under all_roles belong to the wildcard role; ids
    listed under a named role belong to that role only.
    """

    def __init__(self, configuration: ExtensionConfiguration | None = None):
        self._all_roles: list[str] = []
        self._named_roles: dict[str, list[str]] = {}
        if configuration is None:
            return

        for reference in configuration.all_roles or []:
            self.add(ExtensionRole(), reference.id)
        for named in configuration.named_roles or []:
            role = ExtensionRole(named.role_name)
            for reference in named.extensions or []:
                self.add(role, reference.id)

    def add(self, role: ExtensionRole, extension_id: str | None) -> ExtensionConfigurationBuilder:
        if not extension_id:
            return self
        ids = self._all_roles if role.default else self._named_roles.setdefault(role.role_name, [])
        if extension_id not in ids:
            ids.append(extension_id)
        return self

    def exists(self, role: ExtensionRole, extension_id: str | None) -> bool:
        """Whether extension_id is associated with role (wildcard or named)."""
        if not extension_id:
            return False
        if role.default:
            return extension_id in self._all_roles
        return extension_id in self._named_roles.get(role.role_name, [])
