"""IP version (address family) handling."""

import ipaddress
from enum import IntEnum
from typing import Type, Union

from poolip.ip.errors import InvalidIPVersionError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class IPVersion(IntEnum):
    """Supported address families."""

    V4 = 4
    V6 = 6

    @property
    def bits(self) -> int:
        """Address width in bits."""
        return 32 if self is IPVersion.V4 else 128

    @property
    def address_class(self) -> Type[IPAddress]:
        return ipaddress.IPv4Address if self is IPVersion.V4 else ipaddress.IPv6Address

    def __str__(self) -> str:
        return f"IPv{self.value}"


def validate_ip_version(version) -> IPVersion:
    """
    Check that version is one of the supported IP versions.

    Args:
        version: IPVersion member or the plain integer 4 or 6

    Returns:
        Matching IPVersion member

    Raises:
        InvalidIPVersionError: If version is anything else
    """
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidIPVersionError(version)
    try:
        return IPVersion(version)
    except ValueError as e:
        raise InvalidIPVersionError(version) from e
