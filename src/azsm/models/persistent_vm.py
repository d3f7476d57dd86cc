"""
Legacy persistent-VM configuration model.

The earlier Service Management schema describes a role's configuration as a
list of variant-typed configuration sets: one class per concern (network,
Windows provisioning, Linux provisioning). Virtual IPs are plain strings and
endpoint/listener collections are dedicated list types.

Public API:
    ConfigurationSet and its variants
    InputEndpoint, InstanceEndpoint, InstanceEndpointList
    DataVirtualHardDisk, OSVirtualHardDisk
    WinRmConfiguration, WinRmListenerProperties, WinRmListenerCollection
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from azsm.models.base import DictModel

__all__ = [
    "ConfigurationSet",
    "DataVirtualHardDisk",
    "InputEndpoint",
    "InstanceEndpoint",
    "InstanceEndpointList",
    "LinuxProvisioningConfigurationSet",
    "LoadBalancerProbe",
    "NetworkConfigurationSet",
    "OSVirtualHardDisk",
    "ProvisioningConfigurationSet",
    "WinRmConfiguration",
    "WinRmListenerCollection",
    "WinRmListenerProperties",
    "WindowsProvisioningConfigurationSet",
]

NETWORK_CONFIGURATION = "NetworkConfiguration"
WINDOWS_PROVISIONING_CONFIGURATION = "WindowsProvisioningConfiguration"
LINUX_PROVISIONING_CONFIGURATION = "LinuxProvisioningConfiguration"


@dataclass
class LoadBalancerProbe(DictModel):
    path: str | None = None
    port: int | None = None
    protocol: str | None = None
    interval_in_seconds: int | None = None
    timeout_in_seconds: int | None = None


@dataclass
class InputEndpoint(DictModel):
    """Load-balanced endpoint of a network configuration set."""

    load_balanced_endpoint_set_name: str | None = None
    local_port: int | None = None
    name: str | None = None
    port: int | None = None
    load_balancer_probe: LoadBalancerProbe | None = None
    protocol: str | None = None
    vip: str | None = None
    enable_direct_server_return: bool | None = None


@dataclass
class InstanceEndpoint(DictModel):
    """Endpoint exposed by a single role instance."""

    name: str | None = None
    vip: str | None = None
    public_port: int | None = None
    local_port: int | None = None
    protocol: str | None = None


class InstanceEndpointList(list):
    """Ordered collection of InstanceEndpoint."""

    element_type = InstanceEndpoint


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
    os: str | None = None


@dataclass
class WinRmListenerProperties(DictModel):
    """A single WinRM listener; protocol is "Http" or "Https"."""

    protocol: str | None = None
    certificate_thumbprint: str | None = None


class WinRmListenerCollection(list):
    """Ordered collection of WinRmListenerProperties."""

    element_type = WinRmListenerProperties


@dataclass
class WinRmConfiguration(DictModel):
    listeners: WinRmListenerCollection | None = None


@dataclass
class ConfigurationSet(DictModel):
    """Base of every legacy configuration set variant."""

    configuration_set_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigurationSet:
        """Create the variant named by configuration_set_type.

        Only dispatches when called on the base class; calling from_dict on a
        concrete variant always builds that variant.
        """
        if cls is ConfigurationSet and isinstance(data, dict):
            variant = _VARIANTS.get(data.get("configuration_set_type") or "")
            if variant is not None:
                return variant.from_dict(data)
        return super().from_dict(data)


@dataclass
class NetworkConfigurationSet(ConfigurationSet):
    configuration_set_type: str | None = NETWORK_CONFIGURATION
    input_endpoints: list[InputEndpoint] | None = None
    subnet_names: list[str] | None = None


@dataclass
class ProvisioningConfigurationSet(ConfigurationSet):
    """Common base of the OS provisioning variants."""


@dataclass
class WindowsProvisioningConfigurationSet(ProvisioningConfigurationSet):
    configuration_set_type: str | None = WINDOWS_PROVISIONING_CONFIGURATION
    computer_name: str | None = None
    admin_username: str | None = None
    admin_password: str | None = None
    reset_password_on_first_logon: bool | None = None
    enable_automatic_updates: bool | None = None
    time_zone: str | None = None
    win_rm: WinRmConfiguration | None = None


@dataclass
class LinuxProvisioningConfigurationSet(ProvisioningConfigurationSet):
    configuration_set_type: str | None = LINUX_PROVISIONING_CONFIGURATION
    host_name: str | None = None
    user_name: str | None = None
    user_password: str | None = None
    disable_ssh_password_authentication: bool | None = None


_VARIANTS: dict[str, type[ConfigurationSet]] = {
    NETWORK_CONFIGURATION: NetworkConfigurationSet,
    WINDOWS_PROVISIONING_CONFIGURATION: WindowsProvisioningConfigurationSet,
    LINUX_PROVISIONING_CONFIGURATION: LinuxProvisioningConfigurationSet,
}
