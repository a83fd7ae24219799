"""Parsing and validation of IP address and CIDR strings."""

import logging
from typing import Tuple

from poolip.ip.block import Block, mask_ip
from poolip.ip.errors import IPError, InvalidCIDRFormatError, InvalidIPFormatError
from poolip.ip.version import IPAddress, IPVersion, validate_ip_version

logger = logging.getLogger(__name__)


def _parse_address(version: IPVersion, text) -> IPAddress:
    # ValueError on anything that is not a literal of this exact version
    if not isinstance(text, str):
        raise ValueError(f"expected str, got {type(text).__name__}")
    if "%" in text:
        raise ValueError("zone identifiers are not supported")
    return version.address_class(text)


def _parse_prefix_length(text: str, bits: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"prefix length {text!r} is not a decimal number")
    prefix_length = int(text)
    if prefix_length > bits:
        raise ValueError(f"prefix length {prefix_length} exceeds {bits}")
    return prefix_length


def _split_cidr(version: IPVersion, text) -> Tuple[IPAddress, int]:
    try:
        if not isinstance(text, str):
            raise ValueError(f"expected str, got {type(text).__name__}")
        address, sep, prefix = text.partition("/")
        if not sep:
            raise ValueError("missing prefix length")
        return _parse_address(version, address), _parse_prefix_length(prefix, version.bits)
    except ValueError as e:
        logger.debug("Could not parse %s CIDR %r: %s", version, text, e)
        raise InvalidCIDRFormatError(text) from e


def _parse_bare(version: IPVersion, text) -> IPAddress:
    try:
        return _parse_address(version, text)
    except ValueError as e:
        logger.debug("Could not parse %s address %r: %s", version, text, e)
        raise InvalidIPFormatError(text) from e


def parse_ip(version, text: str, is_cidr: bool) -> Block:
    """
    Parse an IP address, either bare or in CIDR notation.

    Args:
        version: IP version the text must belong to
        text: Address literal, or "address/prefix" when is_cidr is set
        is_cidr: Whether text carries a prefix length

    Returns:
        Block with the host address and a full-width prefix for a bare
        address, or the masked network address for CIDR text

    Raises:
        InvalidIPVersionError: If version is not supported
        InvalidIPFormatError: If a bare address does not parse
        InvalidCIDRFormatError: If CIDR text does not parse
    """
    version = validate_ip_version(version)
    if is_cidr:
        return parse_cidr(version, text)
    return Block(_parse_bare(version, text), version.bits)


def parse_cidr(version, text: str) -> Block:
    """
    Parse "address/prefix" text into a Block holding the network address.

    Host bits in the address are zeroed, so "172.18.40.40/24" parses to
    172.18.40.0/24.
    """
    version = validate_ip_version(version)
    ip, prefix_length = _split_cidr(version, text)
    return Block(mask_ip(ip, prefix_length), prefix_length)


def validate_cidr(version, text: str) -> None:
    """Raise unless text is a CIDR block of the given version."""
    _split_cidr(validate_ip_version(version), text)


def validate_ip(version, text: str) -> None:
    """Raise unless text is a bare address of the given version."""
    _parse_bare(validate_ip_version(version), text)


def _matches(check, version: IPVersion, text) -> bool:
    try:
        check(version, text)
    except IPError:
        return False
    return True


def is_ipv4_cidr(text) -> bool:
    """Check whether text is an IPv4 CIDR block. Never raises."""
    return _matches(validate_cidr, IPVersion.V4, text)


def is_ipv6_cidr(text) -> bool:
    """Check whether text is an IPv6 CIDR block. Never raises."""
    return _matches(validate_cidr, IPVersion.V6, text)


def is_ipv4(text) -> bool:
    return _matches(validate_ip, IPVersion.V4, text)


def is_ipv6(text) -> bool:
    return _matches(validate_ip, IPVersion.V6, text)
