"""Compute commands for azsm CLI.

- deployment: Deployment in one slot of a hosted service
- disk: Virtual machine disks
- image: OS images
"""

from __future__ import annotations

import logging
import sys

import click

from azsm.commands.cli_helpers import (
    COMMAND_ERRORS,
    get_commands,
    get_output_format,
    resolve_service_name,
    resolve_slot,
)
from azsm.output import render

logger = logging.getLogger(__name__)

SLOT_HELP = "Deployment slot: Production or Staging (default: from config, else Production)"


@click.command(name="deployment")
@click.argument("service_name", required=False)
@click.option("--slot", help=SLOT_HELP)
@click.pass_context
def deployment(ctx: click.Context, service_name: str | None, slot: str | None) -> None:
    """Show the deployment in a slot of a hosted service.

    \b
    Examples:
      $ azsm deployment my-service
      $ azsm deployment my-service --slot staging
    """
    try:
        context = get_commands(ctx).get_deployment(
            resolve_service_name(ctx, service_name),
            resolve_slot(ctx, slot),
            command_name=ctx.command_path,
        )
        render(
            [context],
            [
                ("Service", "service_name"),
                ("Deployment", "deployment_name"),
                ("Slot", "slot"),
                ("Status", "status"),
                ("Label", "label"),
                ("VNet", "vnet_name"),
                ("Rollback Allowed", "rollback_allowed"),
                ("Upgrade Domains", "upgrade_domain_count"),
            ],
            get_output_format(ctx),
            title="Deployment",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="disk")
@click.argument("disk_name", required=False)
@click.pass_context
def disk(ctx: click.Context, disk_name: str | None) -> None:
    """Show virtual machine disks."""
    try:
        contexts = get_commands(ctx).get_disks(disk_name, command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Disk", "disk_name"),
                ("OS", "os"),
                ("Size (GB)", "disk_size_in_gb"),
                ("Location", "location"),
                ("Attached To", "attached_to"),
                ("Media Link", "media_link"),
            ],
            get_output_format(ctx),
            title="Disks",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="image")
@click.argument("image_name", required=False)
@click.pass_context
def image(ctx: click.Context, image_name: str | None) -> None:
    """Show OS images."""
    try:
        contexts = get_commands(ctx).get_os_images(image_name, command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Image", "image_name"),
                ("OS", "os"),
                ("Category", "category"),
                ("Family", "image_family"),
                ("Size (GB)", "logical_size_in_gb"),
                ("Published", "published_date"),
            ],
            get_output_format(ctx),
            title="OS Images",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
