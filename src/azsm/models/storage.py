"""Storage account responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from azsm.models.base import DictModel
from azsm.models.operations import OperationResponse

__all__ = [
    "StorageAccountGetKeysResponse",
    "StorageService",
    "StorageServiceGetResponse",
    "StorageServiceListResponse",
    "StorageServiceProperties",
]


@dataclass
class StorageServiceProperties(DictModel):
    description: str | None = None
    affinity_group: str | None = None
    location: str | None = None
    label: str | None = None
    status: str | None = None
    endpoints: list[str] = field(default_factory=list)
    geo_replication_enabled: bool | None = None
    geo_primary_region: str | None = None
    geo_secondary_region: str | None = None
    status_of_geo_primary_region: str | None = None
    status_of_geo_secondary_region: str | None = None
    last_geo_failover_time: datetime | None = None


@dataclass
class StorageServiceGetResponse(OperationResponse):
    service_name: str | None = None
    uri: str | None = None
    properties: StorageServiceProperties | None = None
    extended_properties: dict[str, str] = field(default_factory=dict)


@dataclass
class StorageService(DictModel):
    service_name: str | None = None
    uri: str | None = None
    properties: StorageServiceProperties | None = None


@dataclass
class StorageServiceListResponse(OperationResponse):
    storage_services: list[StorageService] = field(default_factory=list)


@dataclass
class StorageAccountGetKeysResponse(OperationResponse):
    uri: str | None = None
    primary_key: str | None = None
    secondary_key: str | None = None
