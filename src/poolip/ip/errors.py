"""Errors raised by the IP address and CIDR helpers."""


class IPError(ValueError):
    """Base class for address validation errors."""


class InvalidIPVersionError(IPError):
    """IP version is neither IPv4 nor IPv6."""

    def __init__(self, version=None):
        self.version = version
        super().__init__(f"invalid IP version: {version!r}")


class InvalidIPFormatError(IPError):
    """Text is not an IP address of the requested version."""

    def __init__(self, text=None):
        self.text = text
        super().__init__(f"invalid IP format: {text!r}")


class InvalidCIDRFormatError(IPError):
    """Text is not a CIDR block of the requested version."""

    def __init__(self, text=None):
        self.text = text
        super().__init__(f"invalid CIDR format: {text!r}")
