"""IP address and CIDR parsing, comparison and set operations."""

from poolip.ip.arith import canonical_key, cmp, next_ip, prev_ip, to_ip
from poolip.ip.block import Block, mask_ip
from poolip.ip.cidr import contains_cidr, contains_ip, is_cidr_overlap
from poolip.ip.errors import (
    IPError,
    InvalidCIDRFormatError,
    InvalidIPFormatError,
    InvalidIPVersionError,
)
from poolip.ip.parse import (
    is_ipv4,
    is_ipv4_cidr,
    is_ipv6,
    is_ipv6_cidr,
    parse_cidr,
    parse_ip,
    validate_cidr,
    validate_ip,
)
from poolip.ip.sets import ips_diff_set, ips_intersection_set, ips_union_set
from poolip.ip.version import IPAddress, IPVersion, validate_ip_version

__all__ = [
    "Block",
    "IPAddress",
    "IPError",
    "IPVersion",
    "InvalidCIDRFormatError",
    "InvalidIPFormatError",
    "InvalidIPVersionError",
    "canonical_key",
    "cmp",
    "contains_cidr",
    "contains_ip",
    "ips_diff_set",
    "ips_intersection_set",
    "ips_union_set",
    "is_cidr_overlap",
    "is_ipv4",
    "is_ipv4_cidr",
    "is_ipv6",
    "is_ipv6_cidr",
    "mask_ip",
    "next_ip",
    "parse_cidr",
    "parse_ip",
    "prev_ip",
    "to_ip",
    "validate_cidr",
    "validate_ip",
    "validate_ip_version",
]
