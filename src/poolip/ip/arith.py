"""Ordering and stepping of individual IP addresses."""

import ipaddress

from poolip.ip.errors import InvalidIPFormatError
from poolip.ip.version import IPAddress

_IPV4_MAPPED_PREFIX = b"\x00" * 10 + b"\xff\xff"


def to_ip(ip) -> IPAddress:
    """
    Normalize an address to an ipaddress object.

    Args:
        ip: IPv4Address/IPv6Address, or its packed 4- or 16-byte form

    Raises:
        InvalidIPFormatError: For any other value
    """
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    if isinstance(ip, (bytes, bytearray)) and len(ip) in (4, 16):
        return ipaddress.ip_address(bytes(ip))
    raise InvalidIPFormatError(ip)


def canonical_key(ip) -> bytes:
    """
    Return the bytes used to compare and deduplicate addresses.

    Every address is widened to 16 bytes; IPv4 takes its IPv4-mapped form
    (::ffff:a.b.c.d), so both spellings of the same host compare equal and
    mixed IPv4/IPv6 lists sort in a single order.
    """
    ip = to_ip(ip)
    if ip.version == 4:
        return _IPV4_MAPPED_PREFIX + ip.packed
    return ip.packed


def cmp(a, b) -> int:
    """Compare two addresses byte-wise. Returns -1, 0 or 1."""
    key_a = canonical_key(a)
    key_b = canonical_key(b)
    return (key_a > key_b) - (key_a < key_b)


def _step(ip, delta: int) -> IPAddress:
    ip = to_ip(ip)
    # wraps at the family boundary
    return type(ip)((int(ip) + delta) % (1 << ip.max_prefixlen))


def next_ip(ip) -> IPAddress:
    """Return the address following ip, wrapping to all-zeros after the last one."""
    return _step(ip, 1)


def prev_ip(ip) -> IPAddress:
    """Return the address preceding ip, wrapping to all-ones before the first one."""
    return _step(ip, -1)
