"""
Current compute-service model.

The active compute API flattens the legacy configuration-set variants into a
single ConfigurationSet, carries virtual IPs as parsed addresses and types
WinRM listeners with an enum. Deployments, roles and extension wire types
live here too since the extension commands consume them together.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from azsm.models.base import DictModel
from azsm.models.operations import OperationResponse

__all__ = [
    "ConfigurationSet",
    "DataVirtualHardDisk",
    "DeploymentGetResponse",
    "DeploymentSlot",
    "ExtensionConfiguration",
    "ExtensionReference",
    "ExtensionRole",
    "ExtensionRoleType",
    "HostedServiceExtension",
    "HostedServiceListExtensionsResponse",
    "IPAddress",
    "InputEndpoint",
    "InstanceEndpoint",
    "LoadBalancerProbe",
    "NamedRoleExtensions",
    "OSVirtualHardDisk",
    "Role",
    "RoleInstance",
    "UpgradeStatus",
    "WindowsRemoteManagementListener",
    "WindowsRemoteManagementListenerType",
    "WindowsRemoteManagementSettings",
]

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


# ============================================================================
# VM CONFIGURATION
# ============================================================================


class WindowsRemoteManagementListenerType(str, Enum):
    HTTP = "Http"
    HTTPS = "Https"

    def __str__(self) -> str:
        return self.value


@dataclass
class LoadBalancerProbe(DictModel):
    path: str | None = None
    port: int | None = None
    protocol: str | None = None
    interval_in_seconds: int | None = None
    timeout_in_seconds: int | None = None


@dataclass
class InputEndpoint(DictModel):
    load_balanced_endpoint_set_name: str | None = None
    local_port: int | None = None
    name: str | None = None
    port: int | None = None
    load_balancer_probe: LoadBalancerProbe | None = None
    protocol: str | None = None
    virtual_ip_address: IPAddress | None = None
    enable_direct_server_return: bool | None = None


@dataclass
class InstanceEndpoint(DictModel):
    name: str | None = None
    virtual_ip_address: IPAddress | None = None
    public_port: int | None = None
    local_port: int | None = None
    protocol: str | None = None


@dataclass
class DataVirtualHardDisk(DictModel):
    host_caching: str | None = None
    disk_label: str | None = None
    disk_name: str | None = None
    lun: int | None = None
    logical_disk_size_in_gb: int | None = None
    media_link: str | None = None
    source_media_link: str | None = None


@dataclass
class OSVirtualHardDisk(DictModel):
    host_caching: str | None = None
    disk_label: str | None = None
    disk_name: str | None = None
    media_link: str | None = None
    source_image_name: str | None = None
    operating_system: str | None = None


@dataclass
class WindowsRemoteManagementListener(DictModel):
    listener_type: WindowsRemoteManagementListenerType | None = None
    certificate_thumbprint: str | None = None


@dataclass
class WindowsRemoteManagementSettings(DictModel):
    listeners: list[WindowsRemoteManagementListener] | None = None


@dataclass
class ConfigurationSet(DictModel):
    """Flattened configuration set.

    Holds the union of the legacy network, Windows and Linux provisioning
    fields; configuration_set_type tells which of them are meaningful.
    """

    configuration_set_type: str | None = None
    input_endpoints: list[InputEndpoint] | None = None
    subnet_names: list[str] | None = None
    computer_name: str | None = None
    admin_username: str | None = None
    admin_password: str | None = None
    reset_password_on_first_logon: bool | None = None
    enable_automatic_updates: bool | None = None
    time_zone: str | None = None
    windows_remote_management: WindowsRemoteManagementSettings | None = None
    host_name: str | None = None
    user_name: str | None = None
    user_password: str | None = None
    disable_ssh_password_authentication: bool | None = None


# ============================================================================
# DEPLOYMENTS
# ============================================================================


class DeploymentSlot(str, Enum):
    PRODUCTION = "Production"
    STAGING = "Staging"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> DeploymentSlot | None:
        if isinstance(value, str):
            for slot in cls:
                if slot.value.lower() == value.strip().lower():
                    return slot
        return None

    @classmethod
    def parse(cls, value: str) -> DeploymentSlot:
        """Parse a slot name case-insensitively.

        Raises:
            ValueError: If value is not Production or Staging
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Invalid deployment slot: '{value}' (expected Production or Staging)"
            ) from None


@dataclass
class Role(DictModel):
    role_name: str | None = None
    role_type: str | None = None
    os_version: str | None = None
    role_size: str | None = None
    configuration_sets: list[ConfigurationSet] | None = None
    data_virtual_hard_disks: list[DataVirtualHardDisk] | None = None
    os_virtual_hard_disk: OSVirtualHardDisk | None = None


@dataclass
class RoleInstance(DictModel):
    role_name: str | None = None
    instance_name: str | None = None
    instance_status: str | None = None
    instance_size: str | None = None
    instance_state_details: str | None = None
    host_name: str | None = None
    ip_address: IPAddress | None = None
    power_state: str | None = None
    instance_upgrade_domain: int | None = None
    instance_fault_domain: int | None = None
    instance_endpoints: list[InstanceEndpoint] | None = None


@dataclass
class UpgradeStatus(DictModel):
    upgrade_type: str | None = None
    current_upgrade_domain_state: str | None = None
    current_upgrade_domain: int | None = None


# ============================================================================
# EXTENSIONS
# ============================================================================


@dataclass
class ExtensionReference(DictModel):
    id: str | None = None


@dataclass
class NamedRoleExtensions(DictModel):
    role_name: str | None = None
    extensions: list[ExtensionReference] = field(default_factory=list)


@dataclass
class ExtensionConfiguration(DictModel):
    """Which extension ids a deployment applies to all roles or to named roles."""

    all_roles: list[ExtensionReference] = field(default_factory=list)
    named_roles: list[NamedRoleExtensions] = field(default_factory=list)


@dataclass
class HostedServiceExtension(DictModel):
    provider_namespace: str | None = None
    type: str | None = None
    id: str | None = None
    version: str | None = None
    thumbprint: str | None = None
    thumbprint_algorithm: str | None = None
    public_configuration: str | None = None


@dataclass
class HostedServiceListExtensionsResponse(OperationResponse):
    extensions: list[HostedServiceExtension] = field(default_factory=list)


@dataclass
class DeploymentGetResponse(OperationResponse):
    name: str | None = None
    deployment_slot: DeploymentSlot | None = None
    private_id: str | None = None
    status: str | None = None
    label: str | None = None
    uri: str | None = None
    configuration: str | None = None
    sdk_version: str | None = None
    locked: bool | None = None
    rollback_allowed: str | None = None
    virtual_network_name: str | None = None
    upgrade_domain_count: int | None = None
    upgrade_status: UpgradeStatus | None = None
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    roles: list[Role] = field(default_factory=list)
    role_instances: list[RoleInstance] = field(default_factory=list)
    extension_configuration: ExtensionConfiguration | None = None


class ExtensionRoleType(str, Enum):
    DEFAULT = "Default"
    NAMED_ROLES = "NamedRoles"


class ExtensionRole:
    """Role an extension is applied to.

    ExtensionRole() (or an empty/blank name) is the wildcard "all roles"
    role; ExtensionRole("WebRole1") is a named role.
    """

    DEFAULT_ROLE_NAME = "Default"

    def __init__(self, role_name: str | None = None):
        if role_name is None or not role_name.strip():
            self.role_name = ""
            self.role_type = ExtensionRoleType.DEFAULT
        else:
            self.role_name = role_name.strip()
            self.role_type = ExtensionRoleType.NAMED_ROLES

    @property
    def default(self) -> bool:
        return self.role_type is ExtensionRoleType.DEFAULT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtensionRole):
            return NotImplemented
        return (self.role_type, self.role_name) == (other.role_type, other.role_name)

    def __hash__(self) -> int:
        return hash((self.role_type, self.role_name))

    def __repr__(self) -> str:
        if self.default:
            return "ExtensionRole()"
        return f"ExtensionRole({self.role_name!r})"

    def __str__(self) -> str:
        return self.DEFAULT_ROLE_NAME if self.default else self.role_name

    def to_dict(self) -> dict[str, Any]:
        return {"role_name": self.role_name, "role_type": self.role_type.value}
