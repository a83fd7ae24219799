"""Shared fixtures for poolip tests."""

import pytest

INVALID_IP_VERSION = 5
INVALID_IP = "invalid"
INVALID_CIDR = "invalid"

POOLIP_ENV_VARS = (
    "POOLIP_IP_VERSION",
    "POOLIP_MAX_QUEUE_SIZE",
    "POOLIP_MAX_WAIT_TIME",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Config.from_env() reads."""
    for name in POOLIP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
