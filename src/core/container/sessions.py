"""Reactive session factories.

Both sessions wrap the same application-scoped SwapiClient.
"""

from functools import lru_cache

from src.core.container.infrastructure import get_swapi_client
from src.presentation.reactive.future_session import FutureSwapiSession
from src.presentation.reactive.rx_session import RxSwapiSession


@lru_cache()
def get_rx_session() -> RxSwapiSession:
    """Return the application-scoped Rx session."""
    return RxSwapiSession(fetcher=get_swapi_client())


@lru_cache()
def get_future_session() -> FutureSwapiSession:
    """Return the application-scoped Future session."""
    return FutureSwapiSession(fetcher=get_swapi_client())
