"""
Service Management mapping profile.

Registers every type map azsm needs:
- legacy persistent-VM model <-> current compute model
- operation status/response -> every context type
- Service Management responses -> contexts

The process-wide registry is built once, behind a lock, and frozen.

Public API:
    build_registry: Build and freeze a new registry
    initialize: Return the process-wide registry, building it on first use
    ServiceManagementProfile: Lazily built registry holder (one latch each)
    to_current_configuration_set / to_legacy_configuration_set
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any

from azsm.mapping.coercions import (
    encode_base64,
    enum_value,
    format_virtual_ip,
    http_status_name,
    is_non_empty,
    parse_listener_type,
    parse_virtual_ip,
)
from azsm.mapping.registry import MappingRegistry
from azsm.models import compute as nsm
from azsm.models import contexts as ctx
from azsm.models import management as mgmt
from azsm.models import persistent_vm as pvm
from azsm.models import storage
from azsm.models.operations import (
    ComputeOperationStatusResponse,
    OperationResponse,
    OperationStatusResponse,
    StorageOperationStatusResponse,
)

__all__ = [
    "OPERATION_CONTEXT_TYPES",
    "OPERATION_STATUS_TYPES",
    "ServiceManagementProfile",
    "build_registry",
    "initialize",
    "to_current_configuration_set",
    "to_current_configuration_sets",
    "to_legacy_configuration_set",
]

OPERATION_STATUS_TYPES: tuple[type[OperationStatusResponse], ...] = (
    OperationStatusResponse,
    ComputeOperationStatusResponse,
    StorageOperationStatusResponse,
)

OPERATION_CONTEXT_TYPES: tuple[type[ctx.ManagementOperationContext], ...] = (
    ctx.ManagementOperationContext,
    ctx.AffinityGroupContext,
    ctx.LocationsContext,
    ctx.CertificateContext,
    ctx.OSVersionsContext,
    ctx.HostedServiceDetailedContext,
    ctx.DiskContext,
    ctx.OSImageContext,
    ctx.StorageServicePropertiesOperationContext,
    ctx.StorageServiceKeyOperationContext,
    ctx.DeploymentInfoContext,
    ctx.ExtensionContext,
    ctx.RemoteDesktopExtensionContext,
)

_LEGACY_VARIANTS: dict[str, type[pvm.ConfigurationSet]] = {
    pvm.NETWORK_CONFIGURATION: pvm.NetworkConfigurationSet,
    pvm.WINDOWS_PROVISIONING_CONFIGURATION: pvm.WindowsProvisioningConfigurationSet,
    pvm.LINUX_PROVISIONING_CONFIGURATION: pvm.LinuxProvisioningConfigurationSet,
}


def _upgrade_status(attribute: str) -> Callable[[nsm.DeploymentGetResponse], Any]:
    def resolve(response: nsm.DeploymentGetResponse) -> Any:
        if response.upgrade_status is None:
            return None
        return getattr(response.upgrade_status, attribute)

    return resolve


def _configure_legacy_to_current(registry: MappingRegistry) -> None:
    registry.create_map(pvm.LoadBalancerProbe, nsm.LoadBalancerProbe)
    registry.create_map(pvm.InputEndpoint, nsm.InputEndpoint).for_member(
        "virtual_ip_address", lambda r: parse_virtual_ip(r.vip)
    )
    registry.create_map(pvm.DataVirtualHardDisk, nsm.DataVirtualHardDisk)
    registry.create_map(pvm.OSVirtualHardDisk, nsm.OSVirtualHardDisk).rename(
        "operating_system", "os"
    )
    registry.create_map(pvm.NetworkConfigurationSet, nsm.ConfigurationSet)
    registry.create_map(pvm.WindowsProvisioningConfigurationSet, nsm.ConfigurationSet).rename(
        "windows_remote_management", "win_rm"
    )
    registry.create_map(pvm.LinuxProvisioningConfigurationSet, nsm.ConfigurationSet)
    registry.create_map(pvm.ProvisioningConfigurationSet, nsm.ConfigurationSet)
    registry.create_map(pvm.ConfigurationSet, nsm.ConfigurationSet)
    registry.create_map(pvm.InstanceEndpoint, nsm.InstanceEndpoint).for_member(
        "virtual_ip_address", lambda r: parse_virtual_ip(r.vip)
    )
    registry.create_map(pvm.WinRmConfiguration, nsm.WindowsRemoteManagementSettings)
    registry.create_map(
        pvm.WinRmListenerProperties, nsm.WindowsRemoteManagementListener
    ).for_member("listener_type", lambda r: parse_listener_type(r.protocol))


def _configure_current_to_legacy(registry: MappingRegistry) -> None:
    registry.create_map(nsm.LoadBalancerProbe, pvm.LoadBalancerProbe)
    registry.create_map(nsm.InputEndpoint, pvm.InputEndpoint).for_member(
        "vip", lambda r: format_virtual_ip(r.virtual_ip_address)
    )
    registry.create_map(nsm.DataVirtualHardDisk, pvm.DataVirtualHardDisk)
    registry.create_map(nsm.OSVirtualHardDisk, pvm.OSVirtualHardDisk).rename(
        "os", "operating_system"
    )
    registry.create_map(nsm.ConfigurationSet, pvm.ConfigurationSet)
    registry.create_map(nsm.ConfigurationSet, pvm.NetworkConfigurationSet)
    registry.create_map(nsm.ConfigurationSet, pvm.WindowsProvisioningConfigurationSet).rename(
        "win_rm", "windows_remote_management"
    )
    registry.create_map(nsm.ConfigurationSet, pvm.LinuxProvisioningConfigurationSet)
    registry.create_map(nsm.InstanceEndpoint, pvm.InstanceEndpoint).for_member(
        "vip", lambda r: format_virtual_ip(r.virtual_ip_address)
    )
    registry.create_map(nsm.WindowsRemoteManagementSettings, pvm.WinRmConfiguration)
    registry.create_map(
        nsm.WindowsRemoteManagementListener, pvm.WinRmListenerProperties
    ).for_member("protocol", lambda r: enum_value(r.listener_type))


def _configure_operation_contexts(registry: MappingRegistry) -> None:
    # Status maps only touch the operation fields; contexts such as
    # ExtensionContext have their own "id" that must not be overwritten.
    for status_type in OPERATION_STATUS_TYPES:
        for context_type in OPERATION_CONTEXT_TYPES:
            registry.create_map(status_type, context_type, auto_copy=False).for_member(
                "operation_id", lambda r: r.id
            ).for_member("operation_status", lambda r: enum_value(r.status))

    registry.create_map(
        OperationResponse, ctx.ManagementOperationContext, auto_copy=False
    ).for_member("operation_id", lambda r: r.request_id).for_member(
        "operation_status", lambda r: http_status_name(r.status_code)
    )


def _configure_management(registry: MappingRegistry) -> None:
    # Affinity groups
    registry.create_map(mgmt.AffinityGroupGetResponse, ctx.AffinityGroupContext)
    registry.create_map(mgmt.AffinityGroup, ctx.AffinityGroupContext)
    registry.create_map(mgmt.HostedServiceReference, ctx.AffinityGroupService).rename("url", "uri")
    registry.create_map(mgmt.StorageServiceReference, ctx.AffinityGroupService).rename("url", "uri")

    # Locations
    registry.create_map(mgmt.Location, ctx.LocationsContext)

    # Service certificates
    registry.create_map(mgmt.ServiceCertificateGetResponse, ctx.CertificateContext).for_member(
        "data", lambda r: encode_base64(r.data)
    )
    registry.create_map(mgmt.ServiceCertificate, ctx.CertificateContext).rename(
        "url", "certificate_uri"
    ).for_member("data", lambda r: encode_base64(r.data))

    # Guest operating systems
    registry.create_map(mgmt.OperatingSystem, ctx.OSVersionsContext)

    # Hosted services
    registry.create_map(mgmt.HostedServiceGetResponse, ctx.HostedServiceDetailedContext).rename(
        "url", "uri"
    )
    registry.create_map(mgmt.HostedServiceProperties, ctx.HostedServiceDetailedContext)
    registry.create_map(mgmt.HostedService, ctx.HostedServiceDetailedContext).rename("url", "uri")

    # Disks
    registry.create_map(mgmt.VirtualMachineDisk, ctx.DiskContext).rename(
        "media_link", "media_link_uri"
    ).rename("disk_size_in_gb", "logical_size_in_gb").rename(
        "os", "operating_system_type"
    ).rename("disk_name", "name").rename("attached_to", "usage_details")
    registry.create_map(mgmt.VirtualMachineDiskUsageDetails, ctx.DiskRoleReference)

    # Images
    registry.create_map(mgmt.VirtualMachineImage, ctx.OSImageContext).rename(
        "media_link", "media_link_uri"
    ).rename("image_name", "name").rename("os", "operating_system_type").rename(
        "icon_uri", "small_icon_uri"
    )


def _configure_storage(registry: MappingRegistry) -> None:
    registry.create_map(
        storage.StorageServiceGetResponse, ctx.StorageServicePropertiesOperationContext
    ).rename("storage_account_name", "service_name")
    registry.create_map(
        storage.StorageServiceProperties, ctx.StorageServicePropertiesOperationContext
    ).rename("storage_account_description", "description").rename(
        "geo_primary_location", "geo_primary_region"
    ).rename("geo_secondary_location", "geo_secondary_region").rename(
        "storage_account_status", "status"
    ).rename("status_of_primary", "status_of_geo_primary_region").rename(
        "status_of_secondary", "status_of_geo_secondary_region"
    )
    registry.create_map(
        storage.StorageService, ctx.StorageServicePropertiesOperationContext
    ).rename("storage_account_name", "service_name")
    registry.create_map(
        storage.StorageAccountGetKeysResponse, ctx.StorageServiceKeyOperationContext
    ).rename("primary", "primary_key").rename("secondary", "secondary_key")


def _configure_deployments(registry: MappingRegistry) -> None:
    registry.create_map(nsm.DeploymentGetResponse, ctx.DeploymentInfoContext).for_member(
        "slot", lambda r: enum_value(r.deployment_slot)
    ).rename("deployment_name", "name").rename("url", "uri").rename(
        "deployment_id", "private_id"
    ).rename("vnet_name", "virtual_network_name").for_member(
        "rollback_allowed", lambda r: is_non_empty(r.rollback_allowed)
    ).rename("role_instance_list", "role_instances").for_member(
        "current_upgrade_domain", _upgrade_status("current_upgrade_domain")
    ).for_member(
        "current_upgrade_domain_state", _upgrade_status("current_upgrade_domain_state")
    ).for_member("upgrade_type", _upgrade_status("upgrade_type"))


def _configure_extensions(registry: MappingRegistry) -> None:
    for context_type in (ctx.ExtensionContext, ctx.RemoteDesktopExtensionContext):
        registry.create_map(nsm.HostedServiceExtension, context_type).rename(
            "extension", "type"
        ).rename("provider_name_space", "provider_namespace")


def build_registry() -> MappingRegistry:
    """Build and freeze a registry holding every Service Management map."""
    registry = MappingRegistry()
    _configure_legacy_to_current(registry)
    _configure_current_to_legacy(registry)
    _configure_operation_contexts(registry)
    _configure_management(registry)
    _configure_storage(registry)
    _configure_deployments(registry)
    _configure_extensions(registry)
    registry.freeze()
    return registry


class ServiceManagementProfile:
    """Holds a registry built on first use.

    initialize() may be called from any number of threads; the builder runs
    once and every caller gets the same frozen registry.
    """

    PROFILE_NAME = "ServiceManagementProfile"

    def __init__(self, builder: Callable[[], MappingRegistry] = build_registry):
        self._builder = builder
        self._registry: MappingRegistry | None = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._registry is not None

    def initialize(self) -> MappingRegistry:
        registry = self._registry
        if registry is None:
            with self._lock:
                if self._registry is None:
                    self._registry = self._builder()
                registry = self._registry
        return registry


_default_profile = ServiceManagementProfile()


def initialize() -> MappingRegistry:
    """Return the process-wide registry, building it on first use."""
    return _default_profile.initialize()


# ============================================================================
# CONFIGURATION SET VARIANTS
# ============================================================================


def to_current_configuration_set(
    registry: MappingRegistry, legacy: pvm.ConfigurationSet | None
) -> nsm.ConfigurationSet | None:
    """Flatten any legacy configuration set variant."""
    return registry.map(legacy, nsm.ConfigurationSet)


def to_current_configuration_sets(
    registry: MappingRegistry, legacy_sets: Iterable[pvm.ConfigurationSet] | None
) -> list[nsm.ConfigurationSet]:
    return registry.map_list(legacy_sets, nsm.ConfigurationSet)


def to_legacy_configuration_set(
    registry: MappingRegistry, current: nsm.ConfigurationSet | None
) -> pvm.ConfigurationSet | None:
    """Split a flattened configuration set back into its legacy variant.

    The variant is chosen from configuration_set_type; unknown or missing
    types map to the legacy base ConfigurationSet.
    """
    if current is None:
        return None
    variant = _LEGACY_VARIANTS.get(current.configuration_set_type or "", pvm.ConfigurationSet)
    return registry.map(current, variant)
