"""
Service Management commands.

Each method implements one command: validate parameters, call the client,
fetch the status of the call's operation and project the response into the
contexts the command emits.

Public API:
    ServiceManagementCommands: One method per command
    OperationError: Invalid command parameters
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from azsm.client import ResourceNotFoundError, ServiceManagementClient
from azsm.extensions import extension_contexts, remote_desktop_extension_contexts
from azsm.mapping import MappingRegistry, initialize, overlay, project, project_many
from azsm.models.compute import DeploymentGetResponse, DeploymentSlot
from azsm.models.contexts import (
    AffinityGroupContext,
    CertificateContext,
    DeploymentInfoContext,
    DiskContext,
    ExtensionContext,
    HostedServiceDetailedContext,
    LocationsContext,
    OSImageContext,
    OSVersionsContext,
    RemoteDesktopExtensionContext,
    StorageServiceKeyOperationContext,
    StorageServicePropertiesOperationContext,
)
from azsm.models.operations import OperationResponse, OperationStatusResponse

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_THUMBPRINT_ALGORITHM", "OperationError", "ServiceManagementCommands"]

DEFAULT_THUMBPRINT_ALGORITHM = "sha1"

R = TypeVar("R", bound=OperationResponse)


class OperationError(Exception):
    """Raised when command parameters are invalid."""

    pass


def _require(value: str | None, description: str) -> str:
    if value is None or not value.strip():
        raise OperationError(f"{description} is required")
    return value.strip()


def _parse_slot(slot: str | DeploymentSlot | None) -> DeploymentSlot:
    if slot is None:
        return DeploymentSlot.PRODUCTION
    if isinstance(slot, DeploymentSlot):
        return slot
    try:
        return DeploymentSlot.parse(slot)
    except ValueError as e:
        raise OperationError(str(e)) from e


def _role_names(deployment: DeploymentGetResponse) -> list[str | None]:
    return [role.role_name for role in deployment.roles or []]


class ServiceManagementCommands:
    """Commands over one client and one (frozen) mapping registry."""

    def __init__(
        self, client: ServiceManagementClient, registry: MappingRegistry | None = None
    ):
        self.client = client
        self.registry = registry if registry is not None else initialize()

    def _execute(
        self,
        command_name: str,
        action: Callable[[], R],
        contextualize: Callable[[OperationStatusResponse, R], Any],
    ) -> Any:
        """Run action, fetch its operation status and build the output."""
        logger.debug(f"{command_name}: calling Service Management")
        response = action()
        operation = self.client.get_operation_status(response.request_id)
        logger.debug(f"{command_name}: operation {operation.id} {operation.status}")
        return contextualize(operation, response)

    # ------------------------------------------------------------------
    # affinity groups and locations
    # ------------------------------------------------------------------

    def get_affinity_groups(
        self, name: str | None = None, command_name: str = "Get-AzureAffinityGroup"
    ) -> list[AffinityGroupContext]:
        if name:
            return self._execute(
                command_name,
                lambda: self.client.get_affinity_group(name),
                lambda s, r: [project(self.registry, r, AffinityGroupContext, s, command_name)],
            )
        return self._execute(
            command_name,
            self.client.list_affinity_groups,
            lambda s, r: project_many(
                self.registry, r.affinity_groups, AffinityGroupContext, s, command_name
            ),
        )

    def get_locations(self, command_name: str = "Get-AzureLocation") -> list[LocationsContext]:
        return self._execute(
            command_name,
            self.client.list_locations,
            lambda s, r: project_many(self.registry, r.locations, LocationsContext, s, command_name),
        )

    # ------------------------------------------------------------------
    # certificates and guest OS
    # ------------------------------------------------------------------

    def get_certificates(
        self,
        service_name: str | None,
        thumbprint: str | None = None,
        thumbprint_algorithm: str = DEFAULT_THUMBPRINT_ALGORITHM,
        command_name: str = "Get-AzureCertificate",
    ) -> list[CertificateContext]:
        service_name = _require(service_name, "Service name")

        if thumbprint:

            def single(s: OperationStatusResponse, r: Any) -> list[CertificateContext]:
                context = project(self.registry, r, CertificateContext, s, command_name)
                context.service_name = service_name
                context.thumbprint = thumbprint
                context.thumbprint_algorithm = thumbprint_algorithm
                return [context]

            return self._execute(
                command_name,
                lambda: self.client.get_service_certificate(
                    service_name, thumbprint_algorithm, thumbprint
                ),
                single,
            )

        def listing(s: OperationStatusResponse, r: Any) -> list[CertificateContext]:
            contexts = project_many(self.registry, r.certificates, CertificateContext, s, command_name)
            for context in contexts:
                context.service_name = service_name
            return contexts

        return self._execute(
            command_name, lambda: self.client.list_service_certificates(service_name), listing
        )

    def get_os_versions(self, command_name: str = "Get-AzureOSVersion") -> list[OSVersionsContext]:
        return self._execute(
            command_name,
            self.client.list_operating_systems,
            lambda s, r: project_many(
                self.registry, r.operating_systems, OSVersionsContext, s, command_name
            ),
        )

    # ------------------------------------------------------------------
    # hosted services and deployments
    # ------------------------------------------------------------------

    def get_services(
        self, service_name: str | None = None, command_name: str = "Get-AzureService"
    ) -> list[HostedServiceDetailedContext]:
        if service_name:

            def single(s: OperationStatusResponse, r: Any) -> list[HostedServiceDetailedContext]:
                context = project(self.registry, r, HostedServiceDetailedContext, s, command_name)
                return [overlay(self.registry, r.properties, context)]

            return self._execute(
                command_name, lambda: self.client.get_hosted_service(service_name), single
            )

        def listing(s: OperationStatusResponse, r: Any) -> list[HostedServiceDetailedContext]:
            return [
                overlay(
                    self.registry,
                    service.properties,
                    project(self.registry, service, HostedServiceDetailedContext, s, command_name),
                )
                for service in r.hosted_services
            ]

        return self._execute(command_name, self.client.list_hosted_services, listing)

    def get_deployment(
        self,
        service_name: str | None,
        slot: str | DeploymentSlot | None = None,
        command_name: str = "Get-AzureDeployment",
    ) -> DeploymentInfoContext:
        service_name = _require(service_name, "Service name")
        deployment_slot = _parse_slot(slot)

        def contextualize(s: OperationStatusResponse, r: DeploymentGetResponse) -> Any:
            context = project(self.registry, r, DeploymentInfoContext, s, command_name)
            context.service_name = service_name
            return context

        return self._execute(
            command_name,
            lambda: self.client.get_deployment_by_slot(service_name, deployment_slot),
            contextualize,
        )

    # ------------------------------------------------------------------
    # extensions
    # ------------------------------------------------------------------

    def _deployment_for_extensions(
        self, service_name: str | None, slot: str | DeploymentSlot | None
    ) -> tuple[str, DeploymentGetResponse]:
        service_name = _require(service_name, "Service name")
        deployment_slot = _parse_slot(slot)
        self.client.get_hosted_service(service_name)
        deployment = self.client.get_deployment_by_slot(service_name, deployment_slot)
        return service_name, deployment

    def get_service_extensions(
        self,
        service_name: str | None,
        slot: str | DeploymentSlot | None = None,
        namespace: str | None = None,
        extension_type: str | None = None,
        command_name: str = "Get-AzureServiceExtension",
    ) -> list[ExtensionContext]:
        service_name, deployment = self._deployment_for_extensions(service_name, slot)
        return self._execute(
            command_name,
            lambda: self.client.list_extensions(service_name),
            lambda s, r: extension_contexts(
                self.registry,
                _role_names(deployment),
                r.extensions,
                deployment.extension_configuration,
                namespace,
                extension_type,
                s,
                command_name,
            ),
        )

    def get_remote_desktop_extensions(
        self,
        service_name: str | None,
        slot: str | DeploymentSlot | None = None,
        command_name: str = "Get-AzureServiceRemoteDesktopExtension",
    ) -> list[RemoteDesktopExtensionContext]:
        service_name, deployment = self._deployment_for_extensions(service_name, slot)
        return self._execute(
            command_name,
            lambda: self.client.list_extensions(service_name),
            lambda s, r: remote_desktop_extension_contexts(
                self.registry,
                _role_names(deployment),
                r.extensions,
                deployment.extension_configuration,
                s,
                command_name,
            ),
        )

    # ------------------------------------------------------------------
    # disks and images
    # ------------------------------------------------------------------

    def get_disks(
        self, disk_name: str | None = None, command_name: str = "Get-AzureDisk"
    ) -> list[DiskContext]:
        def contextualize(s: OperationStatusResponse, r: Any) -> list[DiskContext]:
            disks = r.disks
            if disk_name:
                disks = [d for d in disks if (d.name or "").lower() == disk_name.lower()]
                if not disks:
                    raise ResourceNotFoundError(f"Disk '{disk_name}' not found")
            return project_many(self.registry, disks, DiskContext, s, command_name)

        return self._execute(command_name, self.client.list_disks, contextualize)

    def get_os_images(
        self, image_name: str | None = None, command_name: str = "Get-AzureVMImage"
    ) -> list[OSImageContext]:
        def contextualize(s: OperationStatusResponse, r: Any) -> list[OSImageContext]:
            images = r.images
            if image_name:
                images = [i for i in images if (i.name or "").lower() == image_name.lower()]
                if not images:
                    raise ResourceNotFoundError(f"Image '{image_name}' not found")
            return project_many(self.registry, images, OSImageContext, s, command_name)

        return self._execute(command_name, self.client.list_os_images, contextualize)

    # ------------------------------------------------------------------
    # storage accounts
    # ------------------------------------------------------------------

    def get_storage_accounts(
        self, name: str | None = None, command_name: str = "Get-AzureStorageAccount"
    ) -> list[StorageServicePropertiesOperationContext]:
        context_type = StorageServicePropertiesOperationContext
        if name:

            def single(s: OperationStatusResponse, r: Any) -> list[Any]:
                context = project(self.registry, r, context_type, s, command_name)
                return [overlay(self.registry, r.properties, context)]

            return self._execute(command_name, lambda: self.client.get_storage_account(name), single)

        def listing(s: OperationStatusResponse, r: Any) -> list[Any]:
            return [
                overlay(
                    self.registry,
                    account.properties,
                    project(self.registry, account, context_type, s, command_name),
                )
                for account in r.storage_services
            ]

        return self._execute(command_name, self.client.list_storage_accounts, listing)

    def get_storage_keys(
        self, name: str | None, command_name: str = "Get-AzureStorageKey"
    ) -> StorageServiceKeyOperationContext:
        name = _require(name, "Storage account name")

        def contextualize(s: OperationStatusResponse, r: Any) -> StorageServiceKeyOperationContext:
            context = project(self.registry, r, StorageServiceKeyOperationContext, s, command_name)
            context.storage_account_name = name
            return context

        return self._execute(command_name, lambda: self.client.get_storage_keys(name), contextualize)
