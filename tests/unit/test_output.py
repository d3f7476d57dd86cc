"""Unit tests for output rendering."""

import json
from datetime import datetime

import pytest
from rich.console import Console

from azsm.models.compute import DeploymentSlot, ExtensionRole
from azsm.models.contexts import DiskRoleReference, ExtensionContext
from azsm.output import format_cell, render


class TestFormatCell:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "-"),
            (True, "yes"),
            (False, "no"),
            (DeploymentSlot.STAGING, "Staging"),
            (datetime(2014, 3, 1, 10, 0), "2014-03-01 10:00:00"),
            (["Compute", "Storage"], "Compute, Storage"),
            ([], "-"),
            ({"owner": "web"}, "owner=web"),
            (ExtensionRole(), "Default"),
            (ExtensionRole("WebRole1"), "WebRole1"),
            (30, "30"),
        ],
    )
    def test_values(self, value, expected):
        assert format_cell(value) == expected

    def test_nested_dataclass(self):
        reference = DiskRoleReference(hosted_service_name="web", role_name="WebRole1")
        assert format_cell(reference) == "hosted_service_name=web, role_name=WebRole1"


class TestRender:
    def test_json(self, capsys):
        contexts = [ExtensionContext(id="E1", role=ExtensionRole(), operation_status="Succeeded")]

        render(contexts, [("Id", "id")], "json")

        data = json.loads(capsys.readouterr().out)
        assert data[0]["id"] == "E1"
        assert data[0]["role"]["role_type"] == "Default"
        assert data[0]["operation_status"] == "Succeeded"

    def test_table(self):
        console = Console(record=True, width=120)
        contexts = [ExtensionContext(id="E1", role=ExtensionRole("WebRole1"))]

        render(contexts, [("Role", "role"), ("Id", "id")], "table", title="Extensions", console=console)

        text = console.export_text()
        assert "Extensions" in text
        assert "WebRole1" in text
        assert "E1" in text

    def test_empty_table(self):
        console = Console(record=True, width=120)

        render([], [("Role", "role"), ("Id", "id")], "table", console=console)

        assert "No results" in console.export_text()
