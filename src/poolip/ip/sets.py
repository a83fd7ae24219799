"""Set operations over lists of IP addresses.

Addresses are equal when cmp() says so. Results keep first-seen order and
contain no duplicates.
"""

from typing import Dict, Iterable, List

from poolip.ip.arith import canonical_key, to_ip
from poolip.ip.version import IPAddress


def _index(ips: Iterable) -> Dict[bytes, IPAddress]:
    index: Dict[bytes, IPAddress] = {}
    for ip in ips:
        ip = to_ip(ip)
        index.setdefault(canonical_key(ip), ip)
    return index


def ips_diff_set(ips1: Iterable, ips2: Iterable) -> List[IPAddress]:
    """Return addresses of ips1 that are not in ips2."""
    exclude = _index(ips2)
    return [ip for key, ip in _index(ips1).items() if key not in exclude]


def ips_union_set(ips1: Iterable, ips2: Iterable) -> List[IPAddress]:
    """Return addresses of ips1 followed by those only found in ips2."""
    union = _index(ips1)
    for key, ip in _index(ips2).items():
        union.setdefault(key, ip)
    return list(union.values())


def ips_intersection_set(ips1: Iterable, ips2: Iterable) -> List[IPAddress]:
    """Return addresses of ips1 that are also in ips2."""
    include = _index(ips2)
    return [ip for key, ip in _index(ips1).items() if key in include]
