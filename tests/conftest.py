"""
Shared test fixtures and configuration for azsm tests.

This module provides common fixtures used across all test types:
- Isolated config directory (never touches ~/.azsm)
- The recorded subscription snapshot and a client/commands over it
- A freshly built mapping registry
"""

from pathlib import Path

import pytest

from azsm.client import SnapshotClient
from azsm.config_manager import ConfigManager
from azsm.mapping import build_registry
from azsm.operations import ServiceManagementCommands

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# ============================================================================
# DIRECTORY FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point ConfigManager at a temporary ~/.azsm for every test."""
    config_dir = tmp_path / ".azsm"
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_DIR", config_dir)
    monkeypatch.delenv("AZSM_SNAPSHOT", raising=False)
    return config_dir


# ============================================================================
# MAPPING FIXTURES
# ============================================================================


@pytest.fixture(scope="session")
def registry():
    """A frozen registry holding every Service Management map."""
    return build_registry()


# ============================================================================
# SNAPSHOT FIXTURES
# ============================================================================


@pytest.fixture
def snapshot_path():
    """Path to the recorded subscription used by command tests."""
    return FIXTURES_DIR / "subscription.yaml"


@pytest.fixture
def snapshot_client(snapshot_path):
    return SnapshotClient.from_file(snapshot_path)


@pytest.fixture
def commands(snapshot_client, registry):
    return ServiceManagementCommands(snapshot_client, registry)
