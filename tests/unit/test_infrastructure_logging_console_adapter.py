"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error)
- Context binding
- structlog configuration (renderer choice, level filter)

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_message_and_context(self, level):
        """Each level method forwards message and context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("swapi_event", url="https://swapi.dev", size=3)

            getattr(mock_logger, level).assert_called_once_with(
                "swapi_event",
                url="https://swapi.dev",
                size=3,
            )

    def test_error_adds_exception_details(self):
        """error() expands the exception into type and message fields."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("demo_failed", error=RuntimeError("boom"), variant="single")

            mock_logger.error.assert_called_once_with(
                "demo_failed",
                variant="single",
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_error_without_exception(self):
        """error() without an exception logs only the given context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("demo_failed")

            mock_logger.error.assert_called_once_with("demo_failed")


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter_with_bound_context(self):
        """bind() wraps the bound structlog logger in a new adapter."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(variant="fetch_single")
            bound.info("demo_variant_finished")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(variant="fetch_single")
            bound_logger.info.assert_called_once_with("demo_variant_finished")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterInitialization:
    """Test structlog configuration."""

    def test_console_renderer_by_default(self):
        """Human-readable renderer is used unless JSON is requested."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_json_renderer_when_requested(self):
        """JSON renderer is used for testing/ci."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once_with()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    @pytest.mark.parametrize(
        ("log_level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("bogus", logging.INFO),
        ],
    )
    def test_level_filter(self, log_level, expected):
        """Level name maps to the filtering bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(log_level=log_level)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                expected
            )
