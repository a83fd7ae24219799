"""Containment and overlap checks between CIDR blocks."""

import logging
from typing import Union

from poolip.ip.block import Block, mask_ip
from poolip.ip.errors import InvalidCIDRFormatError
from poolip.ip.parse import parse_cidr, parse_ip
from poolip.ip.version import IPVersion, validate_ip_version

logger = logging.getLogger(__name__)

CIDR = Union[str, Block]


def _to_block(version: IPVersion, cidr: CIDR) -> Block:
    if isinstance(cidr, Block):
        if cidr.version is not version:
            raise InvalidCIDRFormatError(str(cidr))
        # host bits may be set on blocks built by hand
        return Block(cidr.masked(cidr.prefix_length), cidr.prefix_length)
    return parse_cidr(version, cidr)


def contains_cidr(version, outer: CIDR, inner: CIDR) -> bool:
    """
    Check whether the outer CIDR block contains every address of the inner one.

    Args:
        version: IP version of both blocks
        outer: Enclosing block, as "address/prefix" text or a Block
        inner: Enclosed block, as "address/prefix" text or a Block

    Returns:
        True if inner lies within outer (a block contains itself)

    Raises:
        InvalidIPVersionError: If version is not supported
        InvalidCIDRFormatError: If either block does not parse for version
    """
    version = validate_ip_version(version)
    outer_block = _to_block(version, outer)
    inner_block = _to_block(version, inner)

    if inner_block.prefix_length < outer_block.prefix_length:
        return False
    return inner_block.masked(outer_block.prefix_length) == outer_block.ip


def contains_ip(version, subnet: CIDR, ip: str) -> bool:
    """
    Check whether an address belongs to a subnet.

    Raises:
        InvalidIPVersionError: If version is not supported
        InvalidCIDRFormatError: If subnet does not parse for version
        InvalidIPFormatError: If ip does not parse for version
    """
    version = validate_ip_version(version)
    subnet_block = _to_block(version, subnet)
    address = parse_ip(version, ip, False).ip
    return mask_ip(address, subnet_block.prefix_length) == subnet_block.ip


def is_cidr_overlap(version, cidr1: CIDR, cidr2: CIDR) -> bool:
    """
    Check whether two CIDR blocks share at least one address.

    Both bases are masked to the shorter of the two prefixes; the blocks
    overlap exactly when the results are equal.
    """
    version = validate_ip_version(version)
    block1 = _to_block(version, cidr1)
    block2 = _to_block(version, cidr2)

    prefix_length = min(block1.prefix_length, block2.prefix_length)
    overlap = block1.masked(prefix_length) == block2.masked(prefix_length)
    logger.debug("Overlap %s <-> %s: %s", block1, block2, overlap)
    return overlap
