"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, JSON in testing/ci)
- Star Wars API client (httpx)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.enums import Environment

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.swapi.swapi_client import SwapiClient


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment in {Environment.TESTING, Environment.CI}
    return ConsoleAdapter(use_json=use_json, log_level=settings.log_level)


@lru_cache()
def get_swapi_client() -> "SwapiClient":
    """Return the application-scoped Star Wars API client.

    Returns:
        SwapiClient: Client configured from settings.
    """
    from src.infrastructure.swapi.swapi_client import SwapiClient

    return SwapiClient(
        base_url=settings.swapi_base_url,
        timeout=settings.request_timeout,
    )
