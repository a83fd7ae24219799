"""Dual-stack IP address and CIDR arithmetic for address pools."""

__version__ = "1.0.0"
