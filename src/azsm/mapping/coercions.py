"""
Field coercions used by mapping rules.

Each function takes the raw source value and returns the target value.
They raise ValueError on malformed input; the registry turns that into a
MappingError naming the field being mapped.
"""

from __future__ import annotations

import base64
import ipaddress
from enum import Enum
from http import HTTPStatus

from azsm.models.compute import IPAddress, WindowsRemoteManagementListenerType

__all__ = [
    "encode_base64",
    "enum_value",
    "format_virtual_ip",
    "http_status_name",
    "is_non_empty",
    "parse_listener_type",
    "parse_virtual_ip",
]


def parse_virtual_ip(value: str | None) -> IPAddress | None:
    """Parse a virtual IP literal.

    Args:
        value: IPv4 or IPv6 literal, or None/empty

    Returns:
        Parsed address, or None when value is None or empty

    Raises:
        ValueError: If value is present but not a valid IP literal

    Example:
        >>> parse_virtual_ip("10.0.0.4")
        IPv4Address('10.0.0.4')
        >>> parse_virtual_ip("") is None
        True
    """
    if value is None or value == "":
        return None
    return ipaddress.ip_address(value)


def format_virtual_ip(address: IPAddress | None) -> str | None:
    """Format a parsed address back to its canonical literal."""
    if address is None:
        return None
    return str(address)


def encode_base64(data: bytes | None) -> str | None:
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def is_non_empty(value: str | None) -> bool:
    return bool(value)


def enum_value(value: Enum | str | None) -> str | None:
    """Return the wire name of an enum member (strings pass through)."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def http_status_name(code: HTTPStatus | int | None) -> str | None:
    """Name an HTTP status the way Service Management reports it.

    Example:
        >>> http_status_name(404)
        'NotFound'
    """
    if code is None:
        return None
    return HTTPStatus(int(code)).phrase.replace(" ", "").replace("-", "")


def parse_listener_type(protocol: str | None) -> WindowsRemoteManagementListenerType | None:
    """Parse a WinRM listener protocol ("Http"/"Https", any case).

    Raises:
        ValueError: If protocol is not a known listener type
    """
    if protocol is None or protocol == "":
        return None
    for listener_type in WindowsRemoteManagementListenerType:
        if listener_type.value.lower() == protocol.lower():
            return listener_type
    raise ValueError(f"Unknown WinRM listener protocol: '{protocol}'")
