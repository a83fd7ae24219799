"""CIDR block value type and prefix masking."""

from dataclasses import dataclass
import ipaddress
from typing import Union

from poolip.ip.errors import InvalidCIDRFormatError
from poolip.ip.version import IPAddress, IPVersion


def _check_prefix_length(ip: IPAddress, prefix_length: int) -> None:
    if not 0 <= prefix_length <= ip.max_prefixlen:
        raise InvalidCIDRFormatError(f"{ip}/{prefix_length}")


def mask_ip(ip: IPAddress, prefix_length: int) -> IPAddress:
    """
    Zero the host bits of ip beyond prefix_length.

    Raises:
        InvalidCIDRFormatError: If prefix_length is outside [0, 32] or [0, 128]
    """
    _check_prefix_length(ip, prefix_length)
    bits = ip.max_prefixlen
    mask = ((1 << prefix_length) - 1) << (bits - prefix_length)
    return type(ip)(int(ip) & mask)


@dataclass(frozen=True)
class Block:
    """
    An address paired with a prefix length.

    Blocks returned by parse_cidr() carry the network address; blocks for a
    bare address carry the host address with a full-width prefix.
    """

    ip: IPAddress
    prefix_length: int

    def __post_init__(self):
        _check_prefix_length(self.ip, self.prefix_length)

    @property
    def version(self) -> IPVersion:
        return IPVersion(self.ip.version)

    @property
    def network(self) -> Union[ipaddress.IPv4Network, ipaddress.IPv6Network]:
        """Equivalent ipaddress network object."""
        return ipaddress.ip_network((self.ip, self.prefix_length), strict=False)

    def masked(self, prefix_length: int) -> IPAddress:
        """Return the base address masked down to prefix_length."""
        return mask_ip(self.ip, prefix_length)

    def __str__(self) -> str:
        return f"{self.ip}/{self.prefix_length}"
