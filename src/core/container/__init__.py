"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_rx_session, ...

The container is organized into modules:
- infrastructure: Logging and the HTTP client
- sessions: Reactive presentation adapters
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger, get_swapi_client

# Reactive sessions
from src.core.container.sessions import get_future_session, get_rx_session

__all__ = [
    # Infrastructure
    "get_logger",
    "get_swapi_client",
    # Sessions
    "get_rx_session",
    "get_future_session",
]
