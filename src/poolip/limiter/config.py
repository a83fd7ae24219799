"""Rate limiter configuration with defaults for unset fields."""

from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_MAX_QUEUE_SIZE = 1000
DEFAULT_MAX_WAIT_TIME = 15.0  # seconds


@dataclass(frozen=True)
class LimiterConfig:
    """Limiter tunables. None means "use the default"."""

    max_queue_size: Optional[int] = None
    max_wait_time: Optional[float] = None


def set_defaults_for_limiter_config(config: LimiterConfig) -> LimiterConfig:
    """
    Fill unset limiter fields with their defaults.

    Args:
        config: Limiter configuration, possibly with unset fields

    Returns:
        New LimiterConfig; explicit values (including 0) are kept
    """
    changes = {}
    if config.max_queue_size is None:
        changes["max_queue_size"] = DEFAULT_MAX_QUEUE_SIZE
    if config.max_wait_time is None:
        changes["max_wait_time"] = DEFAULT_MAX_WAIT_TIME
    return replace(config, **changes)
