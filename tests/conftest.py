"""Test configuration and fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from cicd_api.core.clock import ProcessClock
from cicd_api.core.config import Settings
from cicd_api.main import create_app


class Ticker:
    """Monotonic source advancing by a fixed step on every read."""

    def __init__(self, start: float = 100.0, step: float = 0.5):
        self.value = start
        self.step = step

    def __call__(self) -> float:
        current = self.value
        self.value += self.step
        return current


FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_clock():
    """Clock with a fixed wall time and a ticking monotonic source."""
    return ProcessClock(monotonic=Ticker(), wall=lambda: FIXED_NOW)


@pytest.fixture
def app(settings, fake_clock):
    """Fresh application per test."""
    return create_app(settings=settings, clock=fake_clock)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app, raise_server_exceptions=False)
