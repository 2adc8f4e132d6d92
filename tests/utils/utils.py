"""Utility helpers for testing.

Provides a controllable PersonFetcherProtocol fake and helpers for
observing reactivex subscriptions from async tests.
"""

import asyncio
from typing import Any

from reactivex import Observable
from reactivex.abc import DisposableBase

from src.core.result import Result
from src.domain.entities.person import Person
from src.domain.errors import SwapiError
from src.domain.value_objects.fetch_request import FetchRequest

SWAPI_PERSON_URL = "https://swapi.dev/api/people/1"


class FakePersonFetcher:
    """In-memory PersonFetcherProtocol implementation.

    Args:
        person_result: Returned by fetch_person().
        hold: When True, every call blocks until ``release`` is set.
    """

    def __init__(
        self,
        *,
        person_result: Result[Person, SwapiError] | None = None,
        hold: bool = False,
    ) -> None:
        self.person_result = person_result
        self.hold = hold
        self.release = asyncio.Event()
        self.requests: list[FetchRequest] = []
        self.cancelled = False

    async def fetch_person(self, request: FetchRequest) -> Result[Person, SwapiError]:
        await self._wait(request)
        assert self.person_result is not None
        return self.person_result

    async def _wait(self, request: FetchRequest) -> None:
        self.requests.append(request)
        if not self.hold:
            return
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise


async def settle(rounds: int = 10) -> None:
    """Let pending tasks and loop callbacks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


def record(observable: Observable[Any]) -> tuple[list[tuple[Any, ...]], DisposableBase]:
    """Subscribe and collect every notification as a tuple.

    Returns:
        (events, subscription): events look like ("next", value),
        ("error", exception) or ("completed",).
    """
    events: list[tuple[Any, ...]] = []
    subscription = observable.subscribe(
        on_next=lambda value: events.append(("next", value)),
        on_error=lambda error: events.append(("error", error)),
        on_completed=lambda: events.append(("completed",)),
    )
    return events, subscription
