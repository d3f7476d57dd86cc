"""
User-facing context objects emitted by azsm commands.

Every context derives from ManagementOperationContext, so every emitted
object carries the id, description and status of the operation that
produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from azsm.models.base import DictModel
from azsm.models.compute import ExtensionRole, RoleInstance

__all__ = [
    "AffinityGroupContext",
    "AffinityGroupService",
    "CertificateContext",
    "DeploymentInfoContext",
    "DiskContext",
    "DiskRoleReference",
    "ExtensionContext",
    "HostedServiceDetailedContext",
    "LocationsContext",
    "ManagementOperationContext",
    "OSImageContext",
    "OSVersionsContext",
    "RemoteDesktopExtensionContext",
    "StorageServiceKeyOperationContext",
    "StorageServicePropertiesOperationContext",
]


@dataclass
class ManagementOperationContext(DictModel):
    operation_description: str | None = None
    operation_id: str | None = None
    operation_status: str | None = None


@dataclass
class AffinityGroupService(DictModel):
    url: str | None = None
    service_name: str | None = None


@dataclass
class AffinityGroupContext(ManagementOperationContext):
    name: str | None = None
    label: str | None = None
    description: str | None = None
    location: str | None = None
    capabilities: list[str] = field(default_factory=list)
    hosted_services: list[AffinityGroupService] = field(default_factory=list)
    storage_services: list[AffinityGroupService] = field(default_factory=list)


@dataclass
class LocationsContext(ManagementOperationContext):
    name: str | None = None
    display_name: str | None = None
    available_services: list[str] = field(default_factory=list)


@dataclass
class CertificateContext(ManagementOperationContext):
    service_name: str | None = None
    url: str | None = None
    thumbprint: str | None = None
    thumbprint_algorithm: str | None = None
    data: str | None = None


@dataclass
class OSVersionsContext(ManagementOperationContext):
    family: int | None = None
    family_label: str | None = None
    is_active: bool | None = None
    is_default: bool | None = None
    version: str | None = None
    label: str | None = None


@dataclass
class HostedServiceDetailedContext(ManagementOperationContext):
    service_name: str | None = None
    url: str | None = None
    label: str | None = None
    description: str | None = None
    location: str | None = None
    affinity_group: str | None = None
    status: str | None = None
    date_created: datetime | None = None
    date_last_modified: datetime | None = None
    extended_properties: dict[str, str] = field(default_factory=dict)


@dataclass
class DiskRoleReference(DictModel):
    hosted_service_name: str | None = None
    deployment_name: str | None = None
    role_name: str | None = None


@dataclass
class DiskContext(ManagementOperationContext):
    affinity_group: str | None = None
    attached_to: DiskRoleReference | None = None
    is_corrupted: bool | None = None
    label: str | None = None
    location: str | None = None
    disk_size_in_gb: int | None = None
    media_link: str | None = None
    disk_name: str | None = None
    source_image_name: str | None = None
    os: str | None = None


@dataclass
class OSImageContext(ManagementOperationContext):
    affinity_group: str | None = None
    category: str | None = None
    label: str | None = None
    location: str | None = None
    logical_size_in_gb: float | None = None
    media_link: str | None = None
    image_name: str | None = None
    os: str | None = None
    eula: str | None = None
    description: str | None = None
    image_family: str | None = None
    published_date: datetime | None = None
    is_premium: bool | None = None
    privacy_uri: str | None = None
    recommended_vm_size: str | None = None
    publisher_name: str | None = None
    icon_uri: str | None = None


@dataclass
class StorageServicePropertiesOperationContext(ManagementOperationContext):
    storage_account_name: str | None = None
    storage_account_description: str | None = None
    affinity_group: str | None = None
    location: str | None = None
    label: str | None = None
    storage_account_status: str | None = None
    endpoints: list[str] = field(default_factory=list)
    geo_replication_enabled: bool | None = None
    geo_primary_location: str | None = None
    geo_secondary_location: str | None = None
    status_of_primary: str | None = None
    status_of_secondary: str | None = None
    last_geo_failover_time: datetime | None = None


@dataclass
class StorageServiceKeyOperationContext(ManagementOperationContext):
    storage_account_name: str | None = None
    primary: str | None = None
    secondary: str | None = None


@dataclass
class DeploymentInfoContext(ManagementOperationContext):
    """Flattened view of a deployment in one slot of a hosted service."""

    service_name: str | None = None
    deployment_name: str | None = None
    deployment_id: str | None = None
    slot: str | None = None
    url: str | None = None
    label: str | None = None
    status: str | None = None
    configuration: str | None = None
    sdk_version: str | None = None
    locked: bool | None = None
    rollback_allowed: bool = False
    vnet_name: str | None = None
    upgrade_domain_count: int | None = None
    current_upgrade_domain: int | None = None
    current_upgrade_domain_state: str | None = None
    upgrade_type: str | None = None
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    role_instance_list: list[RoleInstance] = field(default_factory=list)


@dataclass
class ExtensionContext(ManagementOperationContext):
    extension: str | None = None
    provider_name_space: str | None = None
    id: str | None = None
    role: ExtensionRole | None = None
    version: str | None = None
    thumbprint: str | None = None
    thumbprint_algorithm: str | None = None
    public_configuration: str | None = None


@dataclass
class RemoteDesktopExtensionContext(ExtensionContext):
    user_name: str | None = None
    expiration: str | None = None
