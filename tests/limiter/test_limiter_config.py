"""Tests for poolip.limiter.config module."""

from poolip.limiter.config import (
    DEFAULT_MAX_QUEUE_SIZE,
    DEFAULT_MAX_WAIT_TIME,
    LimiterConfig,
    set_defaults_for_limiter_config,
)


class TestSetDefaultsForLimiterConfig:
    def test_defaults_applied_when_unset(self):
        cfg = set_defaults_for_limiter_config(LimiterConfig())
        assert cfg.max_queue_size == DEFAULT_MAX_QUEUE_SIZE == 1000
        assert cfg.max_wait_time == DEFAULT_MAX_WAIT_TIME == 15.0

    def test_explicit_values_kept(self):
        cfg = set_defaults_for_limiter_config(
            LimiterConfig(max_queue_size=10, max_wait_time=2.5)
        )
        assert cfg.max_queue_size == 10
        assert cfg.max_wait_time == 2.5

    def test_zero_is_not_unset(self):
        cfg = set_defaults_for_limiter_config(
            LimiterConfig(max_queue_size=0, max_wait_time=0)
        )
        assert cfg.max_queue_size == 0
        assert cfg.max_wait_time == 0

    def test_partial(self):
        cfg = set_defaults_for_limiter_config(LimiterConfig(max_queue_size=5))
        assert cfg.max_queue_size == 5
        assert cfg.max_wait_time == DEFAULT_MAX_WAIT_TIME

    def test_input_not_modified(self):
        original = LimiterConfig()
        set_defaults_for_limiter_config(original)
        assert original.max_queue_size is None
        assert original.max_wait_time is None
