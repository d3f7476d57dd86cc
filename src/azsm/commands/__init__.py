"""Command groups for azsm CLI."""

from azsm.commands.compute import deployment, disk, image
from azsm.commands.config import config_group
from azsm.commands.extension import extension_group
from azsm.commands.management import affinity_group, certificate, location, os_version, service
from azsm.commands.storage import storage_account, storage_key

__all__ = [
    "affinity_group",
    "certificate",
    "config_group",
    "deployment",
    "disk",
    "extension_group",
    "image",
    "location",
    "os_version",
    "service",
    "storage_account",
    "storage_key",
]
