"""Reactive presentation adapters.

Thin adapters that republish the single fetch coroutine through
reactive primitives:
- RxSwapiSession: reactivex Observables (completable, single, maybe)
- FutureSwapiSession: asyncio Futures
- delays / operators: chaining helpers used by the demo
"""

from src.presentation.reactive.future_session import FutureSwapiSession
from src.presentation.reactive.rx_session import RxSwapiSession

__all__ = ["FutureSwapiSession", "RxSwapiSession"]
