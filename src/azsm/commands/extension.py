"""Extension commands for azsm CLI.

Shows which extensions are active on which roles of a deployment. An
extension applied to every role is reported against the "Default" role.
"""

from __future__ import annotations

import logging
import sys

import click

from azsm.click_group import AzsmGroup
from azsm.commands.cli_helpers import (
    COMMAND_ERRORS,
    get_commands,
    get_output_format,
    resolve_service_name,
    resolve_slot,
)
from azsm.commands.compute import SLOT_HELP
from azsm.output import render

logger = logging.getLogger(__name__)


@click.group(name="extension", cls=AzsmGroup)
def extension_group():
    """Show extensions active on deployment roles."""
    pass


@extension_group.command(name="list")
@click.argument("service_name", required=False)
@click.option("--slot", help=SLOT_HELP)
@click.option("--namespace", help="Only extensions from this provider namespace")
@click.option("--type", "extension_type", help="Only extensions of this type")
@click.pass_context
def list_extensions(
    ctx: click.Context,
    service_name: str | None,
    slot: str | None,
    namespace: str | None,
    extension_type: str | None,
) -> None:
    """List extensions and the roles they apply to.

    \b
    Examples:
      $ azsm extension list my-service
      $ azsm extension list my-service --namespace Microsoft.Windows.Azure.Extensions --type RDP
    """
    try:
        contexts = get_commands(ctx).get_service_extensions(
            resolve_service_name(ctx, service_name),
            resolve_slot(ctx, slot),
            namespace=namespace,
            extension_type=extension_type,
            command_name=ctx.command_path,
        )
        render(
            contexts,
            [
                ("Role", "role"),
                ("Extension", "extension"),
                ("Namespace", "provider_name_space"),
                ("Id", "id"),
                ("Version", "version"),
            ],
            get_output_format(ctx),
            title="Extensions",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@extension_group.command(name="rdp")
@click.argument("service_name", required=False)
@click.option("--slot", help=SLOT_HELP)
@click.pass_context
def remote_desktop(ctx: click.Context, service_name: str | None, slot: str | None) -> None:
    """Show remote desktop extensions with their user name and expiration."""
    try:
        contexts = get_commands(ctx).get_remote_desktop_extensions(
            resolve_service_name(ctx, service_name),
            resolve_slot(ctx, slot),
            command_name=ctx.command_path,
        )
        render(
            contexts,
            [
                ("Role", "role"),
                ("Id", "id"),
                ("User Name", "user_name"),
                ("Expiration", "expiration"),
            ],
            get_output_format(ctx),
            title="Remote Desktop Extensions",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
