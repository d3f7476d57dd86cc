"""Storage account commands for azsm CLI."""

from __future__ import annotations

import logging
import sys

import click

from azsm.commands.cli_helpers import COMMAND_ERRORS, get_commands, get_output_format
from azsm.output import render

logger = logging.getLogger(__name__)


@click.command(name="storage-account")
@click.argument("name", required=False)
@click.pass_context
def storage_account(ctx: click.Context, name: str | None) -> None:
    """Show storage accounts.

    \b
    Examples:
      $ azsm storage-account
      $ azsm storage-account mystorage
    """
    try:
        contexts = get_commands(ctx).get_storage_accounts(name, command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Account", "storage_account_name"),
                ("Label", "label"),
                ("Location", "location"),
                ("Affinity Group", "affinity_group"),
                ("Status", "storage_account_status"),
                ("Geo Replication", "geo_replication_enabled"),
            ],
            get_output_format(ctx),
            title="Storage Accounts",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="storage-key")
@click.argument("name")
@click.pass_context
def storage_key(ctx: click.Context, name: str) -> None:
    """Show the access keys of a storage account."""
    try:
        context = get_commands(ctx).get_storage_keys(name, command_name=ctx.command_path)
        render(
            [context],
            [
                ("Account", "storage_account_name"),
                ("Primary", "primary"),
                ("Secondary", "secondary"),
            ],
            get_output_format(ctx),
            title="Storage Keys",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
