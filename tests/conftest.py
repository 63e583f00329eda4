"""
pytest configuration and fixtures for Quote Service tests
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import sys

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from api.app import create_app
from store import QuoteStore
from utils import ApiConfig


FIXED_TIMESTAMP = "2024-01-01T08:00:00+08:00"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant RFC3339 timestamp"""
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def quote_store(fixed_clock):
    """Fresh store seeded with the five built-in quotes"""
    return QuoteStore(clock=fixed_clock)


@pytest.fixture
def api_config():
    """API config used by test apps"""
    return ApiConfig(host="127.0.0.1", port=8081, cors_origins=["http://localhost:3000"])


@pytest.fixture
def app(quote_store, api_config):
    """Application wired to the test store"""
    return create_app(store=quote_store, api_config=api_config)


@pytest.fixture
def client(app):
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_payload():
    """Sample create payload"""
    return {"text": "X", "author": "Y", "category": "Z", "color": "c"}


# Pytest configuration
def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
