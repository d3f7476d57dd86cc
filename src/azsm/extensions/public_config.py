"""
Public configuration value lookup.

Extensions carry an opaque public configuration, either XML
(<PublicConfig><UserName>..</UserName></PublicConfig>) or a JSON object.
Commands pull single named values out of it.
"""

from __future__ import annotations

import json
from xml.etree import ElementTree

from azsm.mapping.registry import MappingError
from azsm.models.compute import HostedServiceExtension

__all__ = ["PublicConfigurationError", "get_public_config_value"]


class PublicConfigurationError(MappingError):
    """Raised when an extension's public configuration is not well-formed."""

    pass


def _local_name(tag: str) -> str:
    # "{namespace}Name" -> "Name"
    return tag.rsplit("}", 1)[-1]


def get_public_config_value(extension: HostedServiceExtension, element_name: str) -> str | None:
    """Return a named value from an extension's public configuration.

    Args:
        extension: Extension whose public_configuration is read
        element_name: XML element local name, or JSON object key

    Returns:
        The value as text; None when the payload or element is absent

    Raises:
        PublicConfigurationError: If the payload is neither well-formed XML
            nor a well-formed JSON document
    """
    payload = (extension.public_configuration or "").strip()
    if not payload:
        return None

    if payload.startswith(("{", "[")):
        try:
            document = json.loads(payload)
        except json.JSONDecodeError as e:
            raise PublicConfigurationError(element_name, type(extension), str(e)) from e
        if not isinstance(document, dict) or document.get(element_name) is None:
            return None
        return str(document[element_name])

    try:
        root = ElementTree.fromstring(payload)
    except ElementTree.ParseError as e:
        raise PublicConfigurationError(element_name, type(extension), str(e)) from e

    for element in root.iter():
        if _local_name(element.tag) == element_name:
            return (element.text or "").strip()
    return None
