"""Future adapter over PersonFetcherProtocol.

``fetch_single`` is eager: the fetch starts when the method is called, not
when the future is awaited. The future resolves once with the person name
or with a FetchFailedError. Cancelling the future cancels the fetch.
"""

import asyncio

from src.core.errors import FetchFailedError
from src.core.result import Failure, Result, Success
from src.domain.entities.person import Person
from src.domain.errors import SwapiError
from src.domain.protocols.person_fetcher_protocol import PersonFetcherProtocol
from src.domain.value_objects.fetch_request import FetchRequest


class FutureSwapiSession:
    """Star Wars API fetches published as asyncio Futures.

    Example:
        >>> session = FutureSwapiSession(fetcher=SwapiClient(base_url=...))
        >>> name = await session.fetch_single(request)
    """

    def __init__(self, *, fetcher: PersonFetcherProtocol) -> None:
        self._fetcher = fetcher

    def fetch_single(self, request: FetchRequest) -> asyncio.Future[str]:
        """Start a fetch and return a future for the person name.

        Must be called with a running event loop.

        Args:
            request: Request descriptor.

        Returns:
            Future resolving to the name, or failing with FetchFailedError.
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()
        task = loop.create_task(self._fetcher.fetch_person(request))

        def resolve(finished: asyncio.Task[Result[Person, SwapiError]]) -> None:
            if future.done():
                return
            if finished.cancelled():
                future.cancel()
                return
            error = finished.exception()
            if error is not None:
                future.set_exception(error)
                return
            match finished.result():
                case Success(value=person):
                    future.set_result(person.name)
                case Failure(error=failure):
                    future.set_exception(FetchFailedError(failure))

        def abandon(resolved: asyncio.Future[str]) -> None:
            if resolved.cancelled():
                task.cancel()

        task.add_done_callback(resolve)
        future.add_done_callback(abandon)
        return future
