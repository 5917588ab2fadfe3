"""
Shared test fixtures for the blog service.

Every test gets a fresh PostStore and a FastAPI app built around it, so ids
always start at 1.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.config import Config
from backend.main import create_app
from backend.services.post_store import PostStore


@pytest.fixture
def test_config():
    """Settings with known values, independent of the environment."""
    return Config(APP_TITLE="Blog Test", JSON_INDENT=2, LOG_LEVEL="DEBUG", ALLOWED_ORIGINS=["*"])


@pytest.fixture
def store():
    return PostStore()


@pytest.fixture
def client(test_config, store):
    """A TestClient running startup/shutdown hooks around each test."""
    app = create_app(test_config, store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_post():
    """A valid creation payload."""
    return {"title": "Hello", "categories": ["intro"], "content": "World"}
