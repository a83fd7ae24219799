"""Configuration module for the poolip command line."""

import math
import os
import logging
from typing import List, Optional

from poolip.ip.version import IPVersion, validate_ip_version
from poolip.limiter.config import LimiterConfig, set_defaults_for_limiter_config


class Config:
    """Application configuration."""

    def __init__(
        self,
        ip_version: IPVersion = IPVersion.V4,
        limiter: Optional[LimiterConfig] = None,
    ):
        self.ip_version = ip_version
        self.limiter = set_defaults_for_limiter_config(limiter or LimiterConfig())

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Reads POOLIP_IP_VERSION, POOLIP_MAX_QUEUE_SIZE and POOLIP_MAX_WAIT_TIME.
        Unset or empty variables fall back to defaults.

        Raises:
            ValueError: If any variable holds an invalid value.
        """
        invalid: List[str] = []

        ip_version = IPVersion.V4
        raw_version = os.getenv("POOLIP_IP_VERSION")
        if raw_version:
            try:
                ip_version = validate_ip_version(int(raw_version))
            except ValueError:
                invalid.append(f"POOLIP_IP_VERSION={raw_version!r} (expected 4 or 6)")

        max_queue_size = None
        raw_queue_size = os.getenv("POOLIP_MAX_QUEUE_SIZE")
        if raw_queue_size:
            try:
                max_queue_size = int(raw_queue_size)
                if max_queue_size < 0:
                    raise ValueError(raw_queue_size)
            except ValueError:
                invalid.append(
                    f"POOLIP_MAX_QUEUE_SIZE={raw_queue_size!r} (expected a non-negative integer)"
                )

        max_wait_time = None
        raw_wait_time = os.getenv("POOLIP_MAX_WAIT_TIME")
        if raw_wait_time:
            try:
                max_wait_time = float(raw_wait_time)
                if not math.isfinite(max_wait_time) or max_wait_time < 0:
                    raise ValueError(raw_wait_time)
            except ValueError:
                invalid.append(
                    f"POOLIP_MAX_WAIT_TIME={raw_wait_time!r} (expected non-negative seconds)"
                )

        if invalid:
            raise ValueError(
                f"Invalid environment variables: {', '.join(invalid)}\n"
                "Please fix them in your environment or .env file."
            )

        return cls(
            ip_version=ip_version,
            limiter=LimiterConfig(max_queue_size=max_queue_size, max_wait_time=max_wait_time),
        )

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def __repr__(self) -> str:
        return (
            f"Config(ip_version={self.ip_version}, "
            f"max_queue_size={self.limiter.max_queue_size}, "
            f"max_wait_time={self.limiter.max_wait_time})"
        )
