"""Unit tests for the generic mapping registry."""

from dataclasses import dataclass, field

import pytest

from azsm.mapping.registry import ConfigurationError, MappingError, MappingRegistry


@dataclass
class Inner:
    value: int | None = None


@dataclass
class InnerView:
    value: int | None = None


@dataclass
class Source:
    name: str | None = None
    count: str | None = None
    inner: Inner | None = None
    items: list[Inner] = field(default_factory=list)
    only_in_source: str | None = None


@dataclass
class Target:
    name: str | None = None
    total: int | None = None
    inner: InnerView | None = None
    items: list[InnerView] = field(default_factory=list)
    untouched: str | None = "keep"


def _registry() -> MappingRegistry:
    registry = MappingRegistry()
    registry.create_map(Inner, InnerView)
    registry.create_map(Source, Target).for_member("total", lambda s: int(s.count))
    return registry


class TestCreateMap:
    """Tests for registering type maps."""

    def test_duplicate_pair_rejected(self):
        registry = _registry()
        with pytest.raises(ConfigurationError, match="already registered"):
            registry.create_map(Source, Target)

    def test_non_dataclass_rejected(self):
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError, match="not a dataclass"):
            registry.create_map(dict, Target)

    def test_unknown_target_field_rejected(self):
        registry = MappingRegistry()
        type_map = registry.create_map(Source, Target)
        with pytest.raises(ConfigurationError, match="has no field 'missing'"):
            type_map.for_member("missing", lambda s: None)

    def test_field_configured_twice_rejected(self):
        registry = MappingRegistry()
        type_map = registry.create_map(Source, Target).rename("total", "count")
        with pytest.raises(ConfigurationError, match="already configured"):
            type_map.for_member("total", lambda s: 1)

    def test_rename_from_unknown_source_field_rejected(self):
        registry = MappingRegistry()
        with pytest.raises(ConfigurationError, match="Source has no field 'nope'"):
            registry.create_map(Source, Target).rename("total", "nope")

    def test_frozen_registry_rejects_new_maps(self):
        registry = _registry()
        registry.freeze()

        assert registry.frozen
        with pytest.raises(ConfigurationError, match="frozen"):
            registry.create_map(Target, Source)

    def test_frozen_registry_rejects_new_members(self):
        registry = MappingRegistry()
        type_map = registry.create_map(Source, Target)
        registry.freeze()
        with pytest.raises(ConfigurationError, match="frozen"):
            type_map.for_member("total", lambda s: 1)


class TestMap:
    """Tests for applying maps."""

    def test_copies_same_named_fields_and_applies_rules(self):
        registry = _registry()
        source = Source(name="web", count="3", inner=Inner(7), items=[Inner(1), Inner(2)])

        target = registry.map(source, Target)

        assert target.name == "web"
        assert target.total == 3
        assert target.inner == InnerView(7)
        assert target.items == [InnerView(1), InnerView(2)]
        assert target.untouched == "keep"

    def test_none_maps_to_none(self):
        assert _registry().map(None, Target) is None

    def test_null_nested_value_stays_null(self):
        target = _registry().map(Source(count="1"), Target)
        assert target.inner is None

    def test_unregistered_pair_raises_configuration_error(self):
        with pytest.raises(ConfigurationError, match="No mapping registered from Target to Source"):
            _registry().map(Target(), Source)

    def test_exact_runtime_type_is_used(self):
        @dataclass
        class DerivedSource(Source):
            pass

        with pytest.raises(ConfigurationError):
            _registry().map(DerivedSource(count="1"), Target)

    def test_resolver_value_error_becomes_mapping_error(self):
        with pytest.raises(MappingError) as exc_info:
            _registry().map(Source(count="three"), Target)

        error = exc_info.value
        assert error.field == "total"
        assert error.source_type == "Source"
        assert "Cannot map field 'total' from Source" in str(error)

    def test_without_auto_copy_only_rules_apply(self):
        registry = MappingRegistry()
        registry.create_map(Source, Target, auto_copy=False).for_member("total", lambda s: 5)

        target = registry.map(Source(name="ignored"), Target)

        assert target.name is None
        assert target.total == 5

    def test_map_into_leaves_unmapped_fields(self):
        registry = _registry()
        target = Target(untouched="existing")

        registry.map_into(Source(name="web", count="2"), target)

        assert target.name == "web"
        assert target.untouched == "existing"

    def test_map_list_preserves_order(self):
        registry = _registry()
        result = registry.map_list([Inner(3), Inner(1), Inner(2)], InnerView)
        assert [view.value for view in result] == [3, 1, 2]

    def test_map_list_none_is_empty(self):
        assert _registry().map_list(None, InnerView) == []
