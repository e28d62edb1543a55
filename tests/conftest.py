"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset settings to defaults before each test."""
    from initials_avatar import config

    # Store original values
    original_strict = config.settings.STRICT_VALIDATION

    # Lenient defaulting unless a test opts in
    config.settings.STRICT_VALIDATION = False

    yield

    # Restore original values
    config.settings.STRICT_VALIDATION = original_strict


@pytest.fixture
def client():
    """Create test client for the service."""
    from initials_avatar.main import app

    with TestClient(app) as c:
        yield c
