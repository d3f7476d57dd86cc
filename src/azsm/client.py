"""
Service Management client seam.

Commands talk to Service Management through ServiceManagementClient. Every
call returns a typed response carrying a request id; get_operation_status
returns the status of that request.

SnapshotClient serves recorded responses from a YAML or JSON document. It
backs the command tests and lets the CLI inspect a captured subscription
offline. Every call it answers is recorded as a succeeded operation.

Document layout (all keys optional):

    affinity_groups: [AffinityGroupGetResponse fields]
    locations: [Location fields]
    operating_systems: [OperatingSystem fields]
    disks: [VirtualMachineDisk fields]
    images: [VirtualMachineImage fields]
    hosted_services:
      - service_name, uri, properties
        certificates: [ServiceCertificate fields]
        extensions: [HostedServiceExtension fields]
        deployments: [DeploymentGetResponse fields]
    storage_accounts:
      - service_name, uri, properties, extended_properties
        keys: {primary_key, secondary_key}
"""

import logging
import uuid
from abc import ABC, abstractmethod
from collections import OrderedDict
from http import HTTPStatus
from pathlib import Path
from typing import Any, TypeVar

import yaml

from azsm.models.base import DictModel, ModelDecodeError
from azsm.models.compute import (
    DeploymentGetResponse,
    DeploymentSlot,
    HostedServiceExtension,
    HostedServiceListExtensionsResponse,
)
from azsm.models.management import (
    AffinityGroup,
    AffinityGroupGetResponse,
    AffinityGroupListResponse,
    HostedService,
    HostedServiceGetResponse,
    HostedServiceListResponse,
    Location,
    LocationsListResponse,
    OperatingSystem,
    OperatingSystemListResponse,
    ServiceCertificate,
    ServiceCertificateGetResponse,
    ServiceCertificateListResponse,
    VirtualMachineDisk,
    VirtualMachineDiskListResponse,
    VirtualMachineImage,
    VirtualMachineImageListResponse,
)
from azsm.models.operations import (
    ComputeOperationStatusResponse,
    OperationResponse,
    OperationStatus,
    OperationStatusResponse,
    StorageOperationStatusResponse,
)
from azsm.models.storage import (
    StorageAccountGetKeysResponse,
    StorageService,
    StorageServiceGetResponse,
    StorageServiceListResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=DictModel)

__all__ = [
    "ResourceNotFoundError",
    "ServiceManagementClient",
    "ServiceManagementClientError",
    "SnapshotClient",
]


class ServiceManagementClientError(Exception):
    """Raised when a Service Management call fails."""

    pass


class ResourceNotFoundError(ServiceManagementClientError):
    """Raised when the requested resource does not exist."""

    pass


class ServiceManagementClient(ABC):
    """Typed Service Management operations used by azsm commands."""

    @abstractmethod
    def get_operation_status(self, request_id: str) -> OperationStatusResponse: ...

    @abstractmethod
    def get_affinity_group(self, name: str) -> AffinityGroupGetResponse: ...

    @abstractmethod
    def list_affinity_groups(self) -> AffinityGroupListResponse: ...

    @abstractmethod
    def list_locations(self) -> LocationsListResponse: ...

    @abstractmethod
    def get_service_certificate(
        self, service_name: str, thumbprint_algorithm: str, thumbprint: str
    ) -> ServiceCertificateGetResponse: ...

    @abstractmethod
    def list_service_certificates(self, service_name: str) -> ServiceCertificateListResponse: ...

    @abstractmethod
    def list_operating_systems(self) -> OperatingSystemListResponse: ...

    @abstractmethod
    def get_hosted_service(self, service_name: str) -> HostedServiceGetResponse: ...

    @abstractmethod
    def list_hosted_services(self) -> HostedServiceListResponse: ...

    @abstractmethod
    def list_extensions(self, service_name: str) -> HostedServiceListExtensionsResponse: ...

    @abstractmethod
    def get_deployment_by_slot(
        self, service_name: str, slot: DeploymentSlot
    ) -> DeploymentGetResponse: ...

    @abstractmethod
    def list_disks(self) -> VirtualMachineDiskListResponse: ...

    @abstractmethod
    def list_os_images(self) -> VirtualMachineImageListResponse: ...

    @abstractmethod
    def get_storage_account(self, name: str) -> StorageServiceGetResponse: ...

    @abstractmethod
    def list_storage_accounts(self) -> StorageServiceListResponse: ...

    @abstractmethod
    def get_storage_keys(self, name: str) -> StorageAccountGetKeysResponse: ...


def _same_name(left: str | None, right: str | None) -> bool:
    return (left or "").lower() == (right or "").lower()


class SnapshotClient(ServiceManagementClient):
    """ServiceManagementClient answering from a recorded document.

    Operation statuses are kept for the most recent MAX_TRACKED_OPERATIONS
    requests only; older request ids are reported as not found.
    """

    MAX_TRACKED_OPERATIONS = 256

    def __init__(self, document: dict[str, Any] | None = None):
        if document is not None and not isinstance(document, dict):
            raise ServiceManagementClientError("Snapshot document must be a mapping")
        self._document: dict[str, Any] = document or {}
        self._operations: OrderedDict[str, OperationStatusResponse] = OrderedDict()

    @classmethod
    def from_file(cls, path: str | Path) -> "SnapshotClient":
        """Load a YAML or JSON snapshot.

        Raises:
            ServiceManagementClientError: If the file cannot be read or parsed
        """
        snapshot_path = Path(path).expanduser()
        try:
            with open(snapshot_path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ServiceManagementClientError(f"Snapshot file not found: {snapshot_path}") from e
        except (OSError, yaml.YAMLError) as e:
            raise ServiceManagementClientError(
                f"Failed to read snapshot {snapshot_path}: {e}"
            ) from e

        logger.debug(f"Loaded snapshot from: {snapshot_path}")
        return cls(document or {})

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _section(container: dict[str, Any], key: str) -> list[dict[str, Any]]:
        records = container.get(key) or []
        if not isinstance(records, list):
            raise ServiceManagementClientError(f"Snapshot section '{key}' must be a list")
        for record in records:
            if not isinstance(record, dict):
                raise ServiceManagementClientError(
                    f"Invalid snapshot record in '{key}': expected a mapping, "
                    f"got {type(record).__name__}"
                )
        return records

    def _records(self, key: str) -> list[dict[str, Any]]:
        return self._section(self._document, key)

    @staticmethod
    def _decode(model: type[M], record: dict[str, Any], key: str) -> M:
        try:
            return model.from_dict(record)
        except ModelDecodeError as e:
            raise ServiceManagementClientError(f"Invalid snapshot record in '{key}': {e}") from e

    def _decode_all(
        self, model: type[M], key: str, container: dict[str, Any] | None = None
    ) -> list[M]:
        records = self._section(self._document if container is None else container, key)
        return [self._decode(model, record, key) for record in records]

    def _find(self, key: str, name_field: str, name: str, kind: str) -> dict[str, Any]:
        for record in self._records(key):
            if _same_name(record.get(name_field), name):
                return record
        raise ResourceNotFoundError(f"{kind} '{name}' not found")

    def _hosted_service(self, service_name: str) -> dict[str, Any]:
        return self._find("hosted_services", "service_name", service_name, "Hosted service")

    def _respond(
        self,
        response: OperationResponse,
        status_type: type[OperationStatusResponse] = OperationStatusResponse,
    ) -> Any:
        request_id = uuid.uuid4().hex
        response.request_id = request_id
        response.status_code = HTTPStatus.OK
        self._operations[request_id] = status_type(
            request_id=request_id,
            status_code=HTTPStatus.OK,
            id=request_id,
            status=OperationStatus.SUCCEEDED,
            http_status_code=HTTPStatus.OK,
        )
        while len(self._operations) > self.MAX_TRACKED_OPERATIONS:
            self._operations.popitem(last=False)
        logger.debug(f"{type(response).__name__} answered as request {request_id}")
        return response

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------

    def get_operation_status(self, request_id: str) -> OperationStatusResponse:
        operation = self._operations.get(request_id)
        if operation is None:
            raise ResourceNotFoundError(f"Operation '{request_id}' not found")
        return operation

    def get_affinity_group(self, name: str) -> AffinityGroupGetResponse:
        record = self._find("affinity_groups", "name", name, "Affinity group")
        return self._respond(self._decode(AffinityGroupGetResponse, record, "affinity_groups"))

    def list_affinity_groups(self) -> AffinityGroupListResponse:
        groups = self._decode_all(AffinityGroup, "affinity_groups")
        return self._respond(AffinityGroupListResponse(affinity_groups=groups))

    def list_locations(self) -> LocationsListResponse:
        locations = self._decode_all(Location, "locations")
        return self._respond(LocationsListResponse(locations=locations))

    def get_service_certificate(
        self, service_name: str, thumbprint_algorithm: str, thumbprint: str
    ) -> ServiceCertificateGetResponse:
        service = self._hosted_service(service_name)
        certificates = self._decode_all(ServiceCertificate, "certificates", service)
        for certificate in certificates:
            if _same_name(certificate.thumbprint, thumbprint) and _same_name(
                certificate.thumbprint_algorithm or thumbprint_algorithm, thumbprint_algorithm
            ):
                return self._respond(
                    ServiceCertificateGetResponse(data=certificate.data),
                    ComputeOperationStatusResponse,
                )
        raise ResourceNotFoundError(
            f"Certificate '{thumbprint}' not found in service '{service_name}'"
        )

    def list_service_certificates(self, service_name: str) -> ServiceCertificateListResponse:
        service = self._hosted_service(service_name)
        certificates = self._decode_all(ServiceCertificate, "certificates", service)
        return self._respond(
            ServiceCertificateListResponse(certificates=certificates),
            ComputeOperationStatusResponse,
        )

    def list_operating_systems(self) -> OperatingSystemListResponse:
        systems = self._decode_all(OperatingSystem, "operating_systems")
        return self._respond(
            OperatingSystemListResponse(operating_systems=systems), ComputeOperationStatusResponse
        )

    def get_hosted_service(self, service_name: str) -> HostedServiceGetResponse:
        record = self._hosted_service(service_name)
        return self._respond(
            self._decode(HostedServiceGetResponse, record, "hosted_services"),
            ComputeOperationStatusResponse,
        )

    def list_hosted_services(self) -> HostedServiceListResponse:
        services = self._decode_all(HostedService, "hosted_services")
        return self._respond(
            HostedServiceListResponse(hosted_services=services), ComputeOperationStatusResponse
        )

    def list_extensions(self, service_name: str) -> HostedServiceListExtensionsResponse:
        service = self._hosted_service(service_name)
        extensions = self._decode_all(HostedServiceExtension, "extensions", service)
        return self._respond(
            HostedServiceListExtensionsResponse(extensions=extensions),
            ComputeOperationStatusResponse,
        )

    def get_deployment_by_slot(
        self, service_name: str, slot: DeploymentSlot
    ) -> DeploymentGetResponse:
        service = self._hosted_service(service_name)
        deployments = self._decode_all(DeploymentGetResponse, "deployments", service)
        for deployment in deployments:
            if deployment.deployment_slot is slot:
                return self._respond(deployment, ComputeOperationStatusResponse)
        raise ResourceNotFoundError(
            f"No deployment found in slot '{slot}' of service '{service_name}'"
        )

    def list_disks(self) -> VirtualMachineDiskListResponse:
        disks = self._decode_all(VirtualMachineDisk, "disks")
        return self._respond(
            VirtualMachineDiskListResponse(disks=disks), ComputeOperationStatusResponse
        )

    def list_os_images(self) -> VirtualMachineImageListResponse:
        images = self._decode_all(VirtualMachineImage, "images")
        return self._respond(
            VirtualMachineImageListResponse(images=images), ComputeOperationStatusResponse
        )

    def get_storage_account(self, name: str) -> StorageServiceGetResponse:
        record = self._find("storage_accounts", "service_name", name, "Storage account")
        return self._respond(
            self._decode(StorageServiceGetResponse, record, "storage_accounts"),
            StorageOperationStatusResponse,
        )

    def list_storage_accounts(self) -> StorageServiceListResponse:
        accounts = self._decode_all(StorageService, "storage_accounts")
        return self._respond(
            StorageServiceListResponse(storage_services=accounts), StorageOperationStatusResponse
        )

    def get_storage_keys(self, name: str) -> StorageAccountGetKeysResponse:
        record = self._find("storage_accounts", "service_name", name, "Storage account")
        keys = record.get("keys") or {}
        if not isinstance(keys, dict):
            raise ServiceManagementClientError(
                f"Invalid snapshot record in 'storage_accounts': keys of '{name}' must be a mapping"
            )
        return self._respond(
            StorageAccountGetKeysResponse(
                uri=record.get("uri"),
                primary_key=keys.get("primary_key"),
                secondary_key=keys.get("secondary_key"),
            ),
            StorageOperationStatusResponse,
        )
