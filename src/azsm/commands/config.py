"""Configuration commands for azsm CLI.

- config show: Print the effective configuration
- config set: Change one configuration value
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields

import click
from rich.console import Console

from azsm.click_group import AzsmGroup
from azsm.commands.cli_helpers import get_state
from azsm.config_manager import AzsmConfig, ConfigError, ConfigManager

logger = logging.getLogger(__name__)

CONFIG_KEYS = tuple(f.name for f in fields(AzsmConfig))


@click.group(name="config", cls=AzsmGroup)
def config_group():
    """Show or change azsm configuration (~/.azsm/config.toml)."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the current configuration."""
    console = Console()
    try:
        state = get_state(ctx)
        config = ConfigManager.load_config(state.config_path)
        console.print("\n[bold cyan]azsm Configuration[/bold cyan]\n")
        console.print(f"Config file: {ConfigManager.get_config_path(state.config_path)}")
        click.echo(json.dumps(config.to_dict(), indent=2))
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@config_group.command(name="set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
@click.pass_context
def set_config(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    \b
    Examples:
      $ azsm config set default_service_name my-service
      $ azsm config set default_slot Staging
      $ azsm config set snapshot_path ~/snapshots/subscription.yaml
    """
    console = Console()
    try:
        state = get_state(ctx)
        ConfigManager.update_config(state.config_path, **{key: value})
        console.print(f"[green]✓[/green] {key} = {value}")
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
