"""Rate limiter settings."""

from poolip.limiter.config import (
    DEFAULT_MAX_QUEUE_SIZE,
    DEFAULT_MAX_WAIT_TIME,
    LimiterConfig,
    set_defaults_for_limiter_config,
)

__all__ = [
    "DEFAULT_MAX_QUEUE_SIZE",
    "DEFAULT_MAX_WAIT_TIME",
    "LimiterConfig",
    "set_defaults_for_limiter_config",
]
