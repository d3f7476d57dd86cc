"""Unit tests for extension resolution and public configuration lookup."""

import pytest

from azsm.extensions import (
    REMOTE_DESKTOP_NAMESPACE,
    REMOTE_DESKTOP_TYPE,
    ExtensionConfigurationBuilder,
    PublicConfigurationError,
    candidate_roles,
    check_namespace_type,
    extension_contexts,
    get_public_config_value,
    remote_desktop_extension_contexts,
    resolve_extensions,
)
from azsm.mapping import MappingError
from azsm.models.compute import (
    ExtensionConfiguration,
    ExtensionReference,
    ExtensionRole,
    HostedServiceExtension,
    NamedRoleExtensions,
)
from azsm.models.operations import ComputeOperationStatusResponse, OperationStatus


def _extension(ext_id, namespace=REMOTE_DESKTOP_NAMESPACE, ext_type=REMOTE_DESKTOP_TYPE, config=None):
    return HostedServiceExtension(
        provider_namespace=namespace, type=ext_type, id=ext_id, public_configuration=config
    )


def _configuration(all_roles=(), named=None):
    return ExtensionConfiguration(
        all_roles=[ExtensionReference(id=i) for i in all_roles],
        named_roles=[
            NamedRoleExtensions(role_name=name, extensions=[ExtensionReference(id=i) for i in ids])
            for name, ids in (named or {}).items()
        ],
    )


# ============================================================================
# ROLES AND CONFIGURATION
# ============================================================================


class TestExtensionRole:
    def test_wildcard(self):
        assert ExtensionRole().default
        assert ExtensionRole("  ").default
        assert str(ExtensionRole()) == "Default"

    def test_named(self):
        role = ExtensionRole("WebRole1")
        assert not role.default
        assert str(role) == "WebRole1"
        assert role == ExtensionRole("WebRole1")
        assert role != ExtensionRole()


class TestConfigurationBuilder:
    def test_wildcard_and_named_are_separate(self):
        builder = ExtensionConfigurationBuilder(_configuration(["E1"], {"A": ["E2"]}))

        assert builder.exists(ExtensionRole(), "E1")
        assert not builder.exists(ExtensionRole("A"), "E1")
        assert builder.exists(ExtensionRole("A"), "E2")
        assert not builder.exists(ExtensionRole(), "E2")
        assert not builder.exists(ExtensionRole("B"), "E2")

    def test_empty_id_never_exists(self):
        builder = ExtensionConfigurationBuilder().add(ExtensionRole(), "")
        assert not builder.exists(ExtensionRole(), "")
        assert not builder.exists(ExtensionRole(), None)

    def test_no_configuration(self):
        assert not ExtensionConfigurationBuilder(None).exists(ExtensionRole("A"), "E1")


# ============================================================================
# FILTER
# ============================================================================


class TestResolveExtensions:
    def test_named_then_wildcard(self):
        configuration = _configuration(["E1"], {"A": ["E1"]})

        pairs = resolve_extensions(["A", "B"], [_extension("E1")], configuration, None, None)

        assert [(str(role), ext.id) for role, ext in pairs] == [("A", "E1"), ("Default", "E1")]

    def test_every_associated_pair_is_returned(self):
        configuration = _configuration(["E3"], {"A": ["E1", "E2"], "B": ["E2"]})
        extensions = [_extension("E1"), _extension("E2"), _extension("E3")]

        pairs = resolve_extensions(["A", "B"], extensions, configuration, None, None)

        assert [(str(role), ext.id) for role, ext in pairs] == [
            ("A", "E1"),
            ("A", "E2"),
            ("B", "E2"),
            ("Default", "E3"),
        ]

    def test_filter_keeps_only_associated_matching_pairs(self):
        configuration = _configuration(["E1"], {"A": ["E1"]})
        e1 = _extension("E1", namespace="X", ext_type="Y")
        e2 = _extension("E2", namespace="Z", ext_type="W")

        pairs = resolve_extensions(["A", "B"], [e1, e2], configuration, "X", "Y")

        assert pairs == [(ExtensionRole("A"), e1), (ExtensionRole(), e1)]

    def test_filter_excludes_associated_extension_of_other_type(self):
        configuration = _configuration(["E1", "E2"], {"A": ["E1"], "B": ["E2"]})
        e1 = _extension("E1", namespace="X", ext_type="Y")
        e2 = _extension("E2", namespace="Z", ext_type="W")

        pairs = resolve_extensions(["A", "B"], [e1, e2], configuration, "X", "Y")

        assert pairs == [(ExtensionRole("A"), e1), (ExtensionRole(), e1)]

    def test_namespace_and_type_filter(self):
        configuration = _configuration(["RDP", "DIAG"])
        extensions = [_extension("RDP"), _extension("DIAG", ext_type="Diagnostics")]

        pairs = resolve_extensions([], extensions, configuration, REMOTE_DESKTOP_NAMESPACE, REMOTE_DESKTOP_TYPE)

        assert [ext.id for _, ext in pairs] == ["RDP"]

    def test_no_extensions(self):
        assert resolve_extensions(["A"], None, _configuration(["E1"]), None, None) == []

    def test_no_configuration(self):
        assert resolve_extensions(["A"], [_extension("E1")], None, None, None) == []

    def test_accepts_builder(self):
        builder = ExtensionConfigurationBuilder().add(ExtensionRole("A"), "E1")
        pairs = resolve_extensions(["A"], [_extension("E1")], builder, None, None)
        assert [(role, ext.id) for role, ext in pairs] == [(ExtensionRole("A"), "E1")]

    def test_candidate_roles_dedupes_and_skips_blank(self):
        roles = candidate_roles(["A", "", None, "A", "B"])
        assert roles == [ExtensionRole("A"), ExtensionRole("B"), ExtensionRole()]

    @pytest.mark.parametrize(
        "namespace,ext_type,expected",
        [
            (None, None, True),
            (REMOTE_DESKTOP_NAMESPACE, None, True),
            (None, "RDP", True),
            ("Other.Namespace", None, False),
            (REMOTE_DESKTOP_NAMESPACE, "Diagnostics", False),
        ],
    )
    def test_check_namespace_type(self, namespace, ext_type, expected):
        assert check_namespace_type(_extension("E1"), namespace, ext_type) is expected

    def test_check_namespace_type_none_extension(self):
        assert check_namespace_type(None, None, None) is False


# ============================================================================
# PUBLIC CONFIGURATION
# ============================================================================


class TestPublicConfiguration:
    def test_xml(self):
        extension = _extension(
            "E1", config="<PublicConfig><UserName>admin</UserName><Expiration>2030-01-01</Expiration></PublicConfig>"
        )
        assert get_public_config_value(extension, "UserName") == "admin"
        assert get_public_config_value(extension, "Expiration") == "2030-01-01"

    def test_xml_with_namespace(self):
        extension = _extension(
            "E1", config='<PublicConfig xmlns="http://schemas.microsoft.com/x"><UserName>admin</UserName></PublicConfig>'
        )
        assert get_public_config_value(extension, "UserName") == "admin"

    def test_json(self):
        extension = _extension("E1", config='{"UserName": "admin", "Port": 3389}')
        assert get_public_config_value(extension, "UserName") == "admin"
        assert get_public_config_value(extension, "Port") == "3389"

    @pytest.mark.parametrize("config", [None, "", "   ", "<PublicConfig/>", "{}", "[1, 2]"])
    def test_missing_is_none(self, config):
        assert get_public_config_value(_extension("E1", config=config), "UserName") is None

    @pytest.mark.parametrize("config", ["<PublicConfig><UserName>", "{not json", "plain text"])
    def test_malformed_raises(self, config):
        with pytest.raises(PublicConfigurationError) as exc_info:
            get_public_config_value(_extension("E1", config=config), "UserName")

        assert isinstance(exc_info.value, MappingError)
        assert exc_info.value.field == "UserName"


# ============================================================================
# CONTEXTS
# ============================================================================


class TestExtensionContexts:
    @pytest.fixture
    def operation(self):
        return ComputeOperationStatusResponse(id="op-5", status=OperationStatus.SUCCEEDED)

    def test_extension_contexts(self, registry, operation):
        extension = HostedServiceExtension(
            provider_namespace="Microsoft.Windows.Azure.Extensions",
            type="Diagnostics",
            id="E1",
            version="1.*",
        )

        contexts = extension_contexts(
            registry, ["A"], [extension], _configuration(["E1"]), None, None, operation, "list"
        )

        assert len(contexts) == 1
        context = contexts[0]
        assert context.role == ExtensionRole()
        assert context.extension == "Diagnostics"
        assert context.provider_name_space == "Microsoft.Windows.Azure.Extensions"
        assert context.id == "E1"
        assert context.version == "1.*"
        assert context.operation_id == "op-5"
        assert context.operation_description == "list"

    def test_remote_desktop_contexts(self, registry, operation):
        rdp = _extension("RDP1", config="<PublicConfig><UserName>admin</UserName></PublicConfig>")
        other = _extension("DIAG", ext_type="Diagnostics")

        contexts = remote_desktop_extension_contexts(
            registry, ["A"], [rdp, other], _configuration(["DIAG"], {"A": ["RDP1"]}), operation
        )

        assert [(str(c.role), c.id) for c in contexts] == [("A", "RDP1")]
        assert contexts[0].user_name == "admin"
        assert contexts[0].expiration is None
