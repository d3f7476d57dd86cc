"""
Service Management list/get responses.

Affinity groups, locations, service certificates, guest OS versions, hosted
services, VM disks and VM images as returned by the REST client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from azsm.models.base import DictModel
from azsm.models.operations import OperationResponse

__all__ = [
    "AffinityGroup",
    "AffinityGroupGetResponse",
    "AffinityGroupListResponse",
    "HostedService",
    "HostedServiceGetResponse",
    "HostedServiceListResponse",
    "HostedServiceProperties",
    "HostedServiceReference",
    "Location",
    "LocationsListResponse",
    "OperatingSystem",
    "OperatingSystemListResponse",
    "ServiceCertificate",
    "ServiceCertificateGetResponse",
    "ServiceCertificateListResponse",
    "StorageServiceReference",
    "VirtualMachineDisk",
    "VirtualMachineDiskListResponse",
    "VirtualMachineDiskUsageDetails",
    "VirtualMachineImage",
    "VirtualMachineImageListResponse",
]


# ============================================================================
# AFFINITY GROUPS AND LOCATIONS
# ============================================================================


@dataclass
class HostedServiceReference(DictModel):
    service_name: str | None = None
    uri: str | None = None


@dataclass
class StorageServiceReference(DictModel):
    service_name: str | None = None
    uri: str | None = None


@dataclass
class AffinityGroupGetResponse(OperationResponse):
    name: str | None = None
    label: str | None = None
    description: str | None = None
    location: str | None = None
    capabilities: list[str] = field(default_factory=list)
    hosted_services: list[HostedServiceReference] = field(default_factory=list)
    storage_services: list[StorageServiceReference] = field(default_factory=list)


@dataclass
class AffinityGroup(DictModel):
    name: str | None = None
    label: str | None = None
    description: str | None = None
    location: str | None = None
    capabilities: list[str] = field(default_factory=list)


@dataclass
class AffinityGroupListResponse(OperationResponse):
    affinity_groups: list[AffinityGroup] = field(default_factory=list)


@dataclass
class Location(DictModel):
    name: str | None = None
    display_name: str | None = None
    available_services: list[str] = field(default_factory=list)


@dataclass
class LocationsListResponse(OperationResponse):
    locations: list[Location] = field(default_factory=list)


# ============================================================================
# CERTIFICATES AND GUEST OS
# ============================================================================


@dataclass
class ServiceCertificateGetResponse(OperationResponse):
    data: bytes | None = None


@dataclass
class ServiceCertificate(DictModel):
    certificate_uri: str | None = None
    thumbprint: str | None = None
    thumbprint_algorithm: str | None = None
    data: bytes | None = None


@dataclass
class ServiceCertificateListResponse(OperationResponse):
    certificates: list[ServiceCertificate] = field(default_factory=list)


@dataclass
class OperatingSystem(DictModel):
    version: str | None = None
    label: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    family: int | None = None
    family_label: str | None = None


@dataclass
class OperatingSystemListResponse(OperationResponse):
    operating_systems: list[OperatingSystem] = field(default_factory=list)


# ============================================================================
# HOSTED SERVICES
# ============================================================================


@dataclass
class HostedServiceProperties(DictModel):
    description: str | None = None
    affinity_group: str | None = None
    location: str | None = None
    label: str | None = None
    status: str | None = None
    date_created: datetime | None = None
    date_last_modified: datetime | None = None
    extended_properties: dict[str, str] = field(default_factory=dict)


@dataclass
class HostedServiceGetResponse(OperationResponse):
    service_name: str | None = None
    uri: str | None = None
    properties: HostedServiceProperties | None = None


@dataclass
class HostedService(DictModel):
    service_name: str | None = None
    uri: str | None = None
    properties: HostedServiceProperties | None = None


@dataclass
class HostedServiceListResponse(OperationResponse):
    hosted_services: list[HostedService] = field(default_factory=list)


# ============================================================================
# DISKS AND IMAGES
# ============================================================================


@dataclass
class VirtualMachineDiskUsageDetails(DictModel):
    hosted_service_name: str | None = None
    deployment_name: str | None = None
    role_name: str | None = None


@dataclass
class VirtualMachineDisk(DictModel):
    affinity_group: str | None = None
    is_corrupted: bool | None = None
    label: str | None = None
    location: str | None = None
    logical_size_in_gb: int | None = None
    media_link_uri: str | None = None
    name: str | None = None
    operating_system_type: str | None = None
    source_image_name: str | None = None
    usage_details: VirtualMachineDiskUsageDetails | None = None


@dataclass
class VirtualMachineDiskListResponse(OperationResponse):
    disks: list[VirtualMachineDisk] = field(default_factory=list)


@dataclass
class VirtualMachineImage(DictModel):
    affinity_group: str | None = None
    category: str | None = None
    label: str | None = None
    location: str | None = None
    logical_size_in_gb: float | None = None
    media_link_uri: str | None = None
    name: str | None = None
    operating_system_type: str | None = None
    eula: str | None = None
    description: str | None = None
    image_family: str | None = None
    published_date: datetime | None = None
    is_premium: bool | None = None
    privacy_uri: str | None = None
    recommended_vm_size: str | None = None
    publisher_name: str | None = None
    small_icon_uri: str | None = None


@dataclass
class VirtualMachineImageListResponse(OperationResponse):
    images: list[VirtualMachineImage] = field(default_factory=list)
