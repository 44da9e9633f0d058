import pytest
from fastapi.testclient import TestClient

from report_intake.core.config import Settings
from report_intake.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def small_client():
    """Client whose app only accepts bodies up to 64 bytes."""
    return TestClient(create_app(Settings(max_body_bytes=64)))
