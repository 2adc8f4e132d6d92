"""LoggerProtocol definition for structured logging.

Backend-agnostic contract for the application logger. Every call is a
short snake_case event name plus key-value context.

Log Levels:
    - DEBUG: Detailed diagnostic info (payload sizes, URLs)
    - INFO: Normal demo events (started, finished)
    - WARNING: A fetch failed and the failure is being forwarded
    - ERROR: Unexpected failure in the demo itself

Usage:
    from src.core.container import get_logger
    from src.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.info("demo_started", url=request.url)

    variant_logger = logger.bind(variant="fetch_single")
    variant_logger.info("demo_variant_finished")  # variant auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
