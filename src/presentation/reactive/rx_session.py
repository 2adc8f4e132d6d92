"""Rx adapters over PersonFetcherProtocol.

reactivex has a single ``Observable`` type, so the Single/Maybe/Completable
contracts are expressed by what each observable is allowed to emit:

- fetch_completable: no items; completes or errors
- fetch_single: exactly one item then completes, or errors
- fetch_maybe: one item then completes, completes empty, or errors

Observables are cold: each subscription starts its own fetch on the running
event loop. Disposing the subscription before the fetch resolves cancels
the fetch task and no further callback reaches the observer.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import reactivex
from reactivex import Observable, abc
from reactivex.disposable import Disposable

from src.core.errors import FetchFailedError
from src.core.result import Failure, Result, Success
from src.domain.entities.person import Person
from src.domain.errors import NoDataError, SwapiError
from src.domain.protocols.person_fetcher_protocol import PersonFetcherProtocol
from src.domain.value_objects.fetch_request import FetchRequest

type Deliver[R] = Callable[[R, abc.ObserverBase[Any]], None]


class RxSwapiSession:
    """Star Wars API fetches published as reactivex Observables.

    Attributes:
        _fetcher: Source of fetch results.

    Example:
        >>> session = RxSwapiSession(fetcher=SwapiClient(base_url=...))
        >>> session.fetch_single(request).subscribe(
        ...     on_next=lambda name: print(f"fetchSingle: {name}"),
        ...     on_error=print,
        ... )
    """

    def __init__(self, *, fetcher: PersonFetcherProtocol) -> None:
        self._fetcher = fetcher

    def fetch_completable(self, request: FetchRequest) -> Observable[Any]:
        """Report only whether the person was fetched.

        The decoded person is discarded; every failure is an error.

        Args:
            request: Request descriptor.

        Returns:
            Observable that emits nothing and completes, or errors with
            FetchFailedError.
        """

        def deliver(
            result: Result[Person, SwapiError], observer: abc.ObserverBase[Any]
        ) -> None:
            match result:
                case Success():
                    observer.on_completed()
                case Failure(error=error):
                    observer.on_error(FetchFailedError(error))

        return self._create(lambda: self._fetcher.fetch_person(request), deliver)

    def fetch_single(self, request: FetchRequest) -> Observable[str]:
        """Report exactly one person name or an error.

        Args:
            request: Request descriptor.

        Returns:
            Observable that emits the name then completes, or errors with
            FetchFailedError for every failure.
        """

        def deliver(
            result: Result[Person, SwapiError], observer: abc.ObserverBase[str]
        ) -> None:
            match result:
                case Success(value=person):
                    observer.on_next(person.name)
                    observer.on_completed()
                case Failure(error=error):
                    observer.on_error(FetchFailedError(error))

        return self._create(lambda: self._fetcher.fetch_person(request), deliver)

    def fetch_maybe(self, request: FetchRequest) -> Observable[str]:
        """Report one person name, nothing, or an error.

        An empty response body is the "nothing" outcome: the observable
        completes without emitting. Transport and decode failures error.

        Args:
            request: Request descriptor.

        Returns:
            Observable emitting zero or one name.
        """

        def deliver(
            result: Result[Person, SwapiError], observer: abc.ObserverBase[str]
        ) -> None:
            match result:
                case Success(value=person):
                    observer.on_next(person.name)
                    observer.on_completed()
                case Failure(error=NoDataError()):
                    observer.on_completed()
                case Failure(error=error):
                    observer.on_error(FetchFailedError(error))

        return self._create(lambda: self._fetcher.fetch_person(request), deliver)

    @staticmethod
    def _create[R](
        fetch: Callable[[], Awaitable[R]], deliver: Deliver[R]
    ) -> Observable[Any]:
        """Wrap a fetch coroutine factory into a cold, cancellable Observable.

        Args:
            fetch: Starts one fetch each time it is called.
            deliver: Translates the fetch result into observer calls.

        Returns:
            Observable running one fetch per subscription.
        """

        def subscribe(
            observer: abc.ObserverBase[Any],
            scheduler: abc.SchedulerBase | None = None,
        ) -> abc.DisposableBase:
            task = asyncio.get_running_loop().create_task(fetch())

            def on_done(finished: asyncio.Task[R]) -> None:
                if finished.cancelled():
                    return
                error = finished.exception()
                if error is not None:
                    observer.on_error(error)
                    return
                deliver(finished.result(), observer)

            task.add_done_callback(on_done)
            return Disposable(task.cancel)

        return reactivex.create(subscribe)
