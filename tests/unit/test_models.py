"""Unit tests for dict conversion of azsm models."""

from datetime import datetime, timezone
from http import HTTPStatus
from ipaddress import IPv4Address

import pytest

from azsm.models import persistent_vm as pvm
from azsm.models.base import ModelDecodeError
from azsm.models.compute import (
    DeploymentGetResponse,
    DeploymentSlot,
    ExtensionRole,
    RoleInstance,
)
from azsm.models.contexts import ExtensionContext
from azsm.models.management import ServiceCertificate
from azsm.models.operations import OperationStatus, OperationStatusResponse


class TestFromDict:
    def test_nested_enums_and_dates(self):
        deployment = DeploymentGetResponse.from_dict(
            {
                "name": "prod",
                "deployment_slot": "staging",
                "status_code": 200,
                "created_time": "2014-03-02T08:30:00",
                "upgrade_status": {"upgrade_type": "Auto"},
                "role_instances": [{"role_name": "WebRole1", "ip_address": "10.0.0.4"}],
                "unknown_key": "ignored",
            }
        )

        assert deployment.deployment_slot is DeploymentSlot.STAGING
        assert deployment.status_code is HTTPStatus.OK
        assert deployment.created_time == datetime(2014, 3, 2, 8, 30)
        assert deployment.upgrade_status.upgrade_type == "Auto"
        assert isinstance(deployment.role_instances[0], RoleInstance)
        assert deployment.role_instances[0].ip_address == IPv4Address("10.0.0.4")

    def test_bytes_from_base64(self):
        certificate = ServiceCertificate.from_dict({"data": "AQIDBA=="})
        assert certificate.data == b"\x01\x02\x03\x04"

    def test_typed_list(self):
        configuration = pvm.WinRmConfiguration.from_dict(
            {"listeners": [{"protocol": "Https", "certificate_thumbprint": "ABC"}]}
        )

        assert isinstance(configuration.listeners, pvm.WinRmListenerCollection)
        assert configuration.listeners[0].protocol == "Https"

    def test_variant_from_dict_on_concrete_class(self):
        legacy = pvm.LinuxProvisioningConfigurationSet.from_dict({"host_name": "web01"})
        assert legacy.configuration_set_type == pvm.LINUX_PROVISIONING_CONFIGURATION

    def test_unknown_variant_is_base(self):
        legacy = pvm.ConfigurationSet.from_dict({"configuration_set_type": "Custom"})
        assert type(legacy) is pvm.ConfigurationSet

    def test_utc_suffix(self):
        deployment = DeploymentGetResponse.from_dict({"created_time": "2014-03-02T08:30:00Z"})
        assert deployment.created_time == datetime(2014, 3, 2, 8, 30, tzinfo=timezone.utc)


class TestDecodeErrors:
    def test_names_innermost_field(self):
        with pytest.raises(ModelDecodeError) as exc:
            DeploymentGetResponse.from_dict({"role_instances": [{"ip_address": "not-an-ip"}]})

        assert exc.value.model == "RoleInstance"
        assert exc.value.field == "ip_address"
        assert "not-an-ip" in str(exc.value)

    def test_unknown_enum_value(self):
        with pytest.raises(ModelDecodeError, match="DeploymentGetResponse.deployment_slot"):
            DeploymentGetResponse.from_dict({"deployment_slot": "Bogus"})

    def test_nested_model_must_be_mapping(self):
        with pytest.raises(ModelDecodeError, match="UpgradeStatus: expected a mapping"):
            DeploymentGetResponse.from_dict({"upgrade_status": "Auto"})

    def test_bad_base64(self):
        with pytest.raises(ModelDecodeError, match="ServiceCertificate.data"):
            ServiceCertificate.from_dict({"data": "not base64!"})

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            RoleInstance.from_dict({"ip_address": "999.0.0.1"})


class TestToDict:
    def test_json_compatible(self):
        status = OperationStatusResponse(
            id="op-1", status=OperationStatus.IN_PROGRESS, http_status_code=HTTPStatus.ACCEPTED
        )

        data = status.to_dict()

        assert data["status"] == "InProgress"
        assert data["http_status_code"] == 202
        assert data["error"] is None

    def test_extension_role_in_context(self):
        context = ExtensionContext(id="E1", role=ExtensionRole("WebRole1"))

        data = context.to_dict()

        assert data["role"] == {"role_name": "WebRole1", "role_type": "NamedRoles"}


class TestDeploymentSlot:
    @pytest.mark.parametrize("value", ["Production", "production", " PRODUCTION "])
    def test_parse_case_insensitive(self, value):
        assert DeploymentSlot.parse(value) is DeploymentSlot.PRODUCTION

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Invalid deployment slot"):
            DeploymentSlot.parse("Preview")
