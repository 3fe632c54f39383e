# This project was developed with assistance from AI tools.
"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from parkqueue.main import app


@pytest.fixture
def client():
    return TestClient(app)
