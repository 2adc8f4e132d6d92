"""Pytest configuration and shared fixtures.

Async tests run under pytest-asyncio in auto mode (see pyproject.toml), so
coroutine tests need no explicit marker.
"""

import pytest

from src.domain.value_objects.fetch_request import FetchRequest
from tests.utils.utils import SWAPI_PERSON_URL


@pytest.fixture
def person_request() -> FetchRequest:
    """Request for Luke Skywalker."""
    return FetchRequest(url=SWAPI_PERSON_URL)


@pytest.fixture
def luke_payload() -> dict:
    """Trimmed person payload as served by swapi.dev."""
    return {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "hair_color": "blond",
        "films": ["https://swapi.dev/api/films/1/"],
        "url": "https://swapi.dev/api/people/1/",
    }


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with mocked HTTP transport"
    )
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")
