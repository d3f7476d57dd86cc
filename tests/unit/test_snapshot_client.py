"""Unit tests for SnapshotClient."""

import json
from datetime import datetime, timezone

import pytest

from azsm.client import ResourceNotFoundError, ServiceManagementClientError, SnapshotClient
from azsm.models.compute import DeploymentSlot
from azsm.models.operations import (
    ComputeOperationStatusResponse,
    OperationStatus,
    StorageOperationStatusResponse,
)


class TestLoading:
    def test_from_yaml(self, snapshot_client):
        groups = snapshot_client.list_affinity_groups().affinity_groups
        assert [g.name for g in groups] == ["west-group", "east-group"]

    def test_from_json(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"locations": [{"name": "West US"}]}))

        client = SnapshotClient.from_file(path)

        assert client.list_locations().locations[0].name == "West US"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ServiceManagementClientError, match="not found"):
            SnapshotClient.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("locations: [unclosed")

        with pytest.raises(ServiceManagementClientError, match="Failed to read snapshot"):
            SnapshotClient.from_file(path)

    def test_document_must_be_mapping(self):
        with pytest.raises(ServiceManagementClientError, match="mapping"):
            SnapshotClient(["not", "a", "mapping"])

    def test_section_must_be_list(self):
        client = SnapshotClient({"disks": {"name": "x"}})
        with pytest.raises(ServiceManagementClientError, match="must be a list"):
            client.list_disks()

    def test_empty_document(self):
        assert SnapshotClient().list_hosted_services().hosted_services == []


class TestLookups:
    def test_case_insensitive_names(self, snapshot_client):
        assert snapshot_client.get_hosted_service("WEB-FRONTEND").service_name == "web-frontend"

    def test_unknown_service(self, snapshot_client):
        with pytest.raises(ResourceNotFoundError, match="Hosted service 'nope' not found"):
            snapshot_client.get_hosted_service("nope")

    def test_deployment_by_slot(self, snapshot_client):
        staging = snapshot_client.get_deployment_by_slot("web-frontend", DeploymentSlot.STAGING)
        assert staging.name == "web-frontend-staging"

    def test_missing_slot(self, snapshot_client):
        with pytest.raises(ResourceNotFoundError, match="No deployment found in slot 'Staging'"):
            snapshot_client.get_deployment_by_slot("worker-backend", DeploymentSlot.STAGING)

    def test_certificate_by_thumbprint(self, snapshot_client):
        response = snapshot_client.get_service_certificate("web-frontend", "sha1", "0a1b2c3d")
        assert response.data == b"\x01\x02\x03\x04"

    def test_unknown_certificate(self, snapshot_client):
        with pytest.raises(ResourceNotFoundError):
            snapshot_client.get_service_certificate("web-frontend", "sha1", "FFFF")

    def test_storage_keys(self, snapshot_client):
        keys = snapshot_client.get_storage_keys("webstore")
        assert keys.primary_key == "cHJpbWFyeS1rZXk="


class TestOperationStatus:
    def test_every_call_records_succeeded_operation(self, snapshot_client):
        response = snapshot_client.list_locations()

        operation = snapshot_client.get_operation_status(response.request_id)

        assert operation.id == response.request_id
        assert operation.status is OperationStatus.SUCCEEDED

    def test_request_ids_are_unique(self, snapshot_client):
        first = snapshot_client.list_locations().request_id
        second = snapshot_client.list_locations().request_id
        assert first != second

    def test_status_type_by_service(self, snapshot_client):
        compute = snapshot_client.list_disks()
        storage = snapshot_client.list_storage_accounts()

        assert type(snapshot_client.get_operation_status(compute.request_id)) is ComputeOperationStatusResponse
        assert type(snapshot_client.get_operation_status(storage.request_id)) is StorageOperationStatusResponse

    def test_unknown_operation(self, snapshot_client):
        with pytest.raises(ResourceNotFoundError):
            snapshot_client.get_operation_status("missing")

    def test_only_recent_operations_kept(self, snapshot_client, monkeypatch):
        monkeypatch.setattr(snapshot_client, "MAX_TRACKED_OPERATIONS", 2)

        request_ids = [snapshot_client.list_locations().request_id for _ in range(3)]

        assert len(snapshot_client._operations) == 2
        with pytest.raises(ResourceNotFoundError):
            snapshot_client.get_operation_status(request_ids[0])
        assert snapshot_client.get_operation_status(request_ids[2]).id == request_ids[2]


class TestInvalidRecords:
    """Bad values in a snapshot surface as ServiceManagementClientError."""

    @staticmethod
    def _client_with_deployment(**fields):
        deployment = {"name": "prod", "deployment_slot": "Production", **fields}
        return SnapshotClient(
            {"hosted_services": [{"service_name": "svc", "deployments": [deployment]}]}
        )

    def test_bad_instance_ip(self):
        client = self._client_with_deployment(role_instances=[{"ip_address": "not-an-ip"}])

        with pytest.raises(ServiceManagementClientError, match="RoleInstance.ip_address") as exc:
            client.get_deployment_by_slot("svc", DeploymentSlot.PRODUCTION)

        assert "Invalid snapshot record in 'deployments'" in str(exc.value)

    def test_unknown_slot(self):
        client = self._client_with_deployment(deployment_slot="Bogus")

        with pytest.raises(
            ServiceManagementClientError, match="DeploymentGetResponse.deployment_slot"
        ):
            client.get_deployment_by_slot("svc", DeploymentSlot.PRODUCTION)

    def test_bad_datetime(self):
        client = self._client_with_deployment(created_time="yesterday")

        with pytest.raises(ServiceManagementClientError, match="created_time"):
            client.get_deployment_by_slot("svc", DeploymentSlot.PRODUCTION)

    def test_record_must_be_mapping(self):
        client = SnapshotClient({"locations": ["West US"]})

        with pytest.raises(ServiceManagementClientError, match="expected a mapping, got str"):
            client.list_locations()

    def test_nested_section_must_be_list(self):
        client = SnapshotClient(
            {"hosted_services": [{"service_name": "svc", "extensions": "RDP"}]}
        )

        with pytest.raises(ServiceManagementClientError, match="'extensions' must be a list"):
            client.list_extensions("svc")

    def test_utc_suffix_accepted(self):
        client = self._client_with_deployment(created_time="2014-03-02T08:30:00Z")

        deployment = client.get_deployment_by_slot("svc", DeploymentSlot.PRODUCTION)

        assert deployment.created_time == datetime(2014, 3, 2, 8, 30, tzinfo=timezone.utc)
