"""Unit tests for the composition root (src/core/container).

Tests cover:
- Application-scoped caching
- Sessions sharing one SwapiClient
- Logger adapter selection
"""

from unittest.mock import patch

import pytest

from src.core.container import (
    get_future_session,
    get_logger,
    get_rx_session,
    get_swapi_client,
)
from src.core.enums import Environment
from src.infrastructure.logging.console_adapter import ConsoleAdapter
from src.infrastructure.swapi.swapi_client import SwapiClient
from src.presentation.reactive import FutureSwapiSession, RxSwapiSession


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset cached singletons around each test."""
    factories = [get_logger, get_swapi_client, get_rx_session, get_future_session]
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


@pytest.mark.unit
class TestContainer:
    """Factory behavior."""

    def test_swapi_client_uses_settings(self):
        with patch("src.core.container.infrastructure.settings") as mock_settings:
            mock_settings.swapi_base_url = "https://swapi.example.com/api"
            mock_settings.request_timeout = 5.0

            client = get_swapi_client()

        assert isinstance(client, SwapiClient)
        assert client._base_url == "https://swapi.example.com/api"
        assert client._timeout == 5.0

    def test_factories_are_cached(self):
        assert get_swapi_client() is get_swapi_client()
        assert get_rx_session() is get_rx_session()
        assert get_future_session() is get_future_session()

    def test_sessions_share_client(self):
        rx_session = get_rx_session()
        future_session = get_future_session()

        assert isinstance(rx_session, RxSwapiSession)
        assert isinstance(future_session, FutureSwapiSession)
        assert rx_session._fetcher is get_swapi_client()
        assert future_session._fetcher is get_swapi_client()

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, False),
        ],
    )
    def test_logger_renderer_by_environment(self, environment, use_json):
        with (
            patch("src.core.container.infrastructure.settings") as mock_settings,
            patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter",
                wraps=ConsoleAdapter,
            ) as adapter_cls,
        ):
            mock_settings.environment = environment
            mock_settings.log_level = "WARNING"

            get_logger()

        adapter_cls.assert_called_once_with(use_json=use_json, log_level="WARNING")
