"""Pytest configuration and shared fixtures for ferrous tests."""

from __future__ import annotations

import pytest

from ferrous._config import reset_config
from ferrous._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def clean_state():
    """Reset global configuration and log hooks around every test."""
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from ferrous import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from ferrous import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from ferrous import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from ferrous import Nothing

    return Nothing


class CallCounter:
    """Callable that records how often it ran and returns a fixed value."""

    def __init__(self, value=None):
        self.value = value
        self.calls: list[tuple] = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.value

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def counter():
    """Factory for CallCounter instances."""
    return CallCounter
