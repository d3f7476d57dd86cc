"""Subscription-level commands for azsm CLI.

This module provides commands that read subscription resources:
- affinity-group: Affinity groups and their services
- location: Datacenter locations
- certificate: Certificates of a hosted service
- os-version: Guest OS versions
- service: Hosted services
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
)
from azsm.operations import DEFAULT_THUMBPRINT_ALGORITHM
from azsm.output import render

logger = logging.getLogger(__name__)


@click.command(name="affinity-group")
@click.argument("name", required=False)
@click.pass_context
def affinity_group(ctx: click.Context, name: str | None) -> None:
    """Show affinity groups.

    \b
    Examples:
      $ azsm affinity-group
      $ azsm affinity-group my-group
    """
    try:
        contexts = get_commands(ctx).get_affinity_groups(name, command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Name", "name"),
                ("Label", "label"),
                ("Location", "location"),
                ("Capabilities", "capabilities"),
                ("Status", "operation_status"),
            ],
            get_output_format(ctx),
            title="Affinity Groups",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="location")
@click.pass_context
def location(ctx: click.Context) -> None:
    """List datacenter locations and the services they offer."""
    try:
        contexts = get_commands(ctx).get_locations(command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Name", "name"),
                ("Display Name", "display_name"),
                ("Available Services", "available_services"),
            ],
            get_output_format(ctx),
            title="Locations",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="certificate")
@click.argument("service_name", required=False)
@click.option("--thumbprint", help="Show a single certificate")
@click.option(
    "--thumbprint-algorithm",
    default=DEFAULT_THUMBPRINT_ALGORITHM,
    show_default=True,
    help="Thumbprint algorithm",
)
@click.pass_context
def certificate(
    ctx: click.Context,
    service_name: str | None,
    thumbprint: str | None,
    thumbprint_algorithm: str,
) -> None:
    """Show certificates of a hosted service.

    SERVICE_NAME defaults to default_service_name from config.

    \b
    Examples:
      $ azsm certificate my-service
      $ azsm certificate my-service --thumbprint 0A1B2C...
    """
    try:
        contexts = get_commands(ctx).get_certificates(
            resolve_service_name(ctx, service_name),
            thumbprint=thumbprint,
            thumbprint_algorithm=thumbprint_algorithm,
            command_name=ctx.command_path,
        )
        render(
            contexts,
            [
                ("Service", "service_name"),
                ("Thumbprint", "thumbprint"),
                ("Algorithm", "thumbprint_algorithm"),
                ("Url", "url"),
            ],
            get_output_format(ctx),
            title="Certificates",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="os-version")
@click.pass_context
def os_version(ctx: click.Context) -> None:
    """List guest OS versions."""
    try:
        contexts = get_commands(ctx).get_os_versions(command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Family", "family"),
                ("Family Label", "family_label"),
                ("Version", "version"),
                ("Label", "label"),
                ("Active", "is_active"),
                ("Default", "is_default"),
            ],
            get_output_format(ctx),
            title="Guest OS Versions",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command(name="service")
@click.argument("service_name", required=False)
@click.pass_context
def service(ctx: click.Context, service_name: str | None) -> None:
    """Show hosted services.

    \b
    Examples:
      $ azsm service
      $ azsm service my-service --output json
    """
    try:
        contexts = get_commands(ctx).get_services(service_name, command_name=ctx.command_path)
        render(
            contexts,
            [
                ("Service", "service_name"),
                ("Label", "label"),
                ("Location", "location"),
                ("Affinity Group", "affinity_group"),
                ("Status", "status"),
                ("Created", "date_created"),
            ],
            get_output_format(ctx),
            title="Hosted Services",
        )
    except COMMAND_ERRORS as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
