"""Pytest configuration and shared fixtures for must tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

if TYPE_CHECKING:
    from collections.abc import Generator

# reset_must_state is autouse; it resets global state per test, not per example.
settings.register_profile('must', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('must')


@pytest.fixture(autouse=True)
def reset_must_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test uninitialized, with no log hooks and a clean environment."""
    import logging

    from must import _config, clear_log_hooks

    for name in ('MUST_LOG_LEVEL', 'MUST_LOG_JSON', 'MUST_LOG_RECOVERED'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(_config, '_config', None)
    clear_log_hooks()
    yield
    clear_log_hooks()
    must_logger = logging.getLogger('must')
    must_logger.handlers.clear()
    must_logger.setLevel(logging.NOTSET)
    must_logger.propagate = True


@pytest.fixture
def sample_error() -> ValueError:
    """Sample underlying error for testing."""
    return ValueError('boom')
