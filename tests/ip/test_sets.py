"""Tests for poolip.ip.sets module."""

import ipaddress

from poolip.ip.sets import ips_diff_set, ips_intersection_set, ips_union_set

v4 = ipaddress.IPv4Address
v6 = ipaddress.IPv6Address


class TestIPsDiffSet:
    def test_ipv4(self):
        ips = ips_diff_set(
            [v4("172.18.40.1"), v4("172.18.40.2")],
            [v4("172.18.40.2"), v4("172.18.40.3")],
        )
        assert ips == [v4("172.18.40.1")]

    def test_ipv6(self):
        ips = ips_diff_set(
            [v6("abcd:1234::1"), v6("abcd:1234::2")],
            [v6("abcd:1234::2"), v6("abcd:1234::3")],
        )
        assert ips == [v6("abcd:1234::1")]

    def test_keeps_order_and_drops_duplicates(self):
        ips = ips_diff_set(
            [v4("10.0.0.5"), v4("10.0.0.1"), v4("10.0.0.5"), v4("10.0.0.3")],
            [v4("10.0.0.3")],
        )
        assert ips == [v4("10.0.0.5"), v4("10.0.0.1")]

    def test_empty_inputs(self):
        assert ips_diff_set([], [v4("10.0.0.1")]) == []
        assert ips_diff_set([v4("10.0.0.1")], []) == [v4("10.0.0.1")]

    def test_mapped_ipv6_counts_as_ipv4(self):
        assert ips_diff_set([v4("10.0.0.1")], [v6("::ffff:10.0.0.1")]) == []

    def test_does_not_mutate_inputs(self):
        a = [v4("10.0.0.1"), v4("10.0.0.1")]
        b = [v4("10.0.0.2")]
        ips_diff_set(a, b)
        assert a == [v4("10.0.0.1"), v4("10.0.0.1")]
        assert b == [v4("10.0.0.2")]


class TestIPsUnionSet:
    def test_ipv4(self):
        ips = ips_union_set(
            [v4("172.18.40.1"), v4("172.18.40.2")],
            [v4("172.18.40.2"), v4("172.18.40.3")],
        )
        assert ips == [v4("172.18.40.1"), v4("172.18.40.2"), v4("172.18.40.3")]

    def test_ipv6(self):
        ips = ips_union_set(
            [v6("abcd:1234::1"), v6("abcd:1234::2")],
            [v6("abcd:1234::2"), v6("abcd:1234::3")],
        )
        assert ips == [v6("abcd:1234::1"), v6("abcd:1234::2"), v6("abcd:1234::3")]

    def test_first_operand_order_then_second(self):
        ips = ips_union_set(
            [v4("10.0.0.9"), v4("10.0.0.2"), v4("10.0.0.9")],
            [v4("10.0.0.7"), v4("10.0.0.2"), v4("10.0.0.1"), v4("10.0.0.7")],
        )
        assert ips == [v4("10.0.0.9"), v4("10.0.0.2"), v4("10.0.0.7"), v4("10.0.0.1")]

    def test_accepts_packed_bytes(self):
        ips = ips_union_set([b"\x0a\x00\x00\x01"], [v4("10.0.0.1"), v4("10.0.0.2")])
        assert ips == [v4("10.0.0.1"), v4("10.0.0.2")]


class TestIPsIntersectionSet:
    def test_ipv4(self):
        ips = ips_intersection_set(
            [v4("172.18.40.1"), v4("172.18.40.2")],
            [v4("172.18.40.2"), v4("172.18.40.3")],
        )
        assert ips == [v4("172.18.40.2")]

    def test_ipv6(self):
        ips = ips_intersection_set(
            [v6("abcd:1234::1"), v6("abcd:1234::2")],
            [v6("abcd:1234::2"), v6("abcd:1234::3")],
        )
        assert ips == [v6("abcd:1234::2")]

    def test_order_follows_first_operand(self):
        ips = ips_intersection_set(
            [v4("10.0.0.3"), v4("10.0.0.1"), v4("10.0.0.3"), v4("10.0.0.2")],
            [v4("10.0.0.1"), v4("10.0.0.2"), v4("10.0.0.3")],
        )
        assert ips == [v4("10.0.0.3"), v4("10.0.0.1"), v4("10.0.0.2")]

    def test_disjoint(self):
        assert ips_intersection_set([v4("10.0.0.1")], [v6("abcd::1")]) == []

    def test_accepts_generators(self):
        a = (v4(f"10.0.0.{i}") for i in range(1, 5))
        b = (v4(f"10.0.0.{i}") for i in range(3, 8))
        assert ips_intersection_set(a, b) == [v4("10.0.0.3"), v4("10.0.0.4")]
