"""Shared helper functions for CLI commands.

Every command resolves the same things from the click context: the config
file, the snapshot to answer from, the output format and the command
object that runs against the snapshot.
"""

import logging
from dataclasses import dataclass

import click

from azsm.client import ServiceManagementClientError, SnapshotClient
from azsm.config_manager import ConfigError, ConfigManager
from azsm.mapping import ConfigurationError, MappingError
from azsm.operations import OperationError, ServiceManagementCommands

logger = logging.getLogger(__name__)

# Errors a command reports as "Error: ..." and exit status 1
COMMAND_ERRORS = (
    ServiceManagementClientError,
    OperationError,
    ConfigError,
    MappingError,
    ConfigurationError,
)


@dataclass
class CliState:
    """Global options shared by every command."""

    config_path: str | None = None
    snapshot_path: str | None = None
    output_format: str | None = None


def get_state(ctx: click.Context) -> CliState:
    return ctx.ensure_object(CliState)


def get_output_format(ctx: click.Context) -> str:
    state = get_state(ctx)
    return ConfigManager.get_output_format(state.output_format, state.config_path)


def get_commands(ctx: click.Context) -> ServiceManagementCommands:
    """Build the command object for the configured snapshot.

    Raises:
        ConfigError: If no snapshot is given on the command line or in config
        ServiceManagementClientError: If the snapshot cannot be loaded
    """
    state = get_state(ctx)
    snapshot_path = ConfigManager.get_snapshot_path(state.snapshot_path, state.config_path)
    if not snapshot_path:
        raise ConfigError(
            "No snapshot configured. Pass --snapshot, set AZSM_SNAPSHOT "
            "or run 'azsm config set snapshot_path <file>'."
        )
    logger.debug(f"Using snapshot: {snapshot_path}")
    return ServiceManagementCommands(SnapshotClient.from_file(snapshot_path))


def resolve_service_name(ctx: click.Context, service_name: str | None) -> str:
    """Service name from the argument or the configured default.

    Raises:
        ConfigError: If neither is set
    """
    state = get_state(ctx)
    name = ConfigManager.get_service_name(service_name, state.config_path)
    if not name:
        raise ConfigError(
            "No hosted service specified. Pass a service name or set default_service_name."
        )
    return name


def resolve_slot(ctx: click.Context, slot: str | None) -> str:
    state = get_state(ctx)
    return ConfigManager.get_slot(slot, state.config_path)
