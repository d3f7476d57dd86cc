"""azsm command-line interface.

Global options (--config, --snapshot, --output, --verbose) are collected on
the main group and shared with every command through CliState.
"""

import logging

import click

from azsm import __version__
from azsm.click_group import AzsmGroup
from azsm.commands import (
    affinity_group,
    certificate,
    config_group,
    deployment,
    disk,
    extension_group,
    image,
    location,
    os_version,
    service,
    storage_account,
    storage_key,
)
from azsm.commands.cli_helpers import CliState
from azsm.config_manager import OUTPUT_FORMATS

logger = logging.getLogger(__name__)


@click.group(
    name="azsm",
    cls=AzsmGroup,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--config", "config_path", help="Config file path", type=click.Path())
@click.option(
    "--snapshot",
    "snapshot_path",
    envvar="AZSM_SNAPSHOT",
    type=click.Path(),
    help="Recorded subscription document (YAML or JSON)",
)
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default: from config, else table)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: str | None,
    snapshot_path: str | None,
    output_format: str | None,
    verbose: bool,
) -> None:
    """azsm - Azure Service Management (classic) inspection.

    Reads hosted services, deployments, extensions, certificates, disks,
    images and storage accounts from a recorded subscription snapshot and
    shows them as tables or JSON.

    \b
    MANAGEMENT COMMANDS:
        affinity-group   Show affinity groups
        location         List datacenter locations
        certificate      Show certificates of a hosted service
        os-version       List guest OS versions
        service          Show hosted services

    \b
    COMPUTE COMMANDS:
        deployment       Show the deployment in a slot
        disk             Show virtual machine disks
        image            Show OS images
        extension list   List extensions per role
        extension rdp    Show remote desktop extensions

    \b
    STORAGE COMMANDS:
        storage-account  Show storage accounts
        storage-key      Show storage account keys

    \b
    CONFIGURATION:
        config show      Show configuration
        config set       Set a configuration value
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format="%(message)s", force=True
    )
    ctx.obj = CliState(
        config_path=config_path,
        snapshot_path=snapshot_path,
        output_format=output_format,
    )


main.add_command(affinity_group)
main.add_command(location)
main.add_command(certificate)
main.add_command(os_version)
main.add_command(service)
main.add_command(deployment)
main.add_command(disk)
main.add_command(image)
main.add_command(extension_group)
main.add_command(storage_account)
main.add_command(storage_key)
main.add_command(config_group)


if __name__ == "__main__":
    main()
