"""Test configuration and fixtures."""

import os

import logfire

# Must be set before any Settings object is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

# Configure before the app module is imported (it builds an app on import)
logfire.configure(send_to_logfire=False, console=False)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from inkwell.interface.api.app import create_app  # noqa: E402
from tests.di import build_test_container  # noqa: E402


@pytest.fixture
def client():
    """Test client over an app backed by in-memory persistence."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client
