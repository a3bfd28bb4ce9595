"""Root-level pytest fixtures for all tests."""

import pytest

from sro_correios.config import CorreiosConfig
from tests.helpers import LOGIN_URL, TRACKING_URL


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring the live carrier service"
    )


@pytest.fixture
def config() -> CorreiosConfig:
    """Config pointing at fake endpoints."""
    return CorreiosConfig(
        tracking_url=TRACKING_URL,
        login_url=LOGIN_URL,
        request_token="test-request-token",
        user_agents=("UA-1", "UA-2"),
    )
