"""Reactive completion demo.

Runs the same Star Wars API fetch through every presentation variant and
writes one human-readable line per outcome:

    fetchCompletable: It worked
    fetchSingle: Luke Skywalker
    flatMapMaybe: Long ago in a galaxy far far away... Luke Skywalker
    Future: Luke Skywalker

All variants run concurrently; ``run_demo`` returns when every one of them
has finished.
"""

import asyncio
from collections.abc import Callable
from typing import Any

import reactivex
from reactivex import Observable
from reactivex import operators as ops
from reactivex.scheduler.eventloop import AsyncIOScheduler

from src.core.constants import DEMO_DELAY_SECONDS_DEFAULT, FALLBACK_PERSON_NAME
from src.core.errors import FetchFailedError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.fetch_request import FetchRequest
from src.presentation.reactive.delays import maybe_after_delay
from src.presentation.reactive.future_session import FutureSwapiSession
from src.presentation.reactive.operators import switch_if_empty
from src.presentation.reactive.rx_session import RxSwapiSession

type Emit = Callable[[str], None]


def _drain(
    observable: Observable[Any],
    *,
    on_next: Callable[[Any], None],
    on_error: Callable[[Exception], None],
    scheduler: AsyncIOScheduler,
) -> asyncio.Future[None]:
    """Subscribe and return a future that resolves on completion or error."""
    finished: asyncio.Future[None] = asyncio.get_running_loop().create_future()

    def finish() -> None:
        if not finished.done():
            finished.set_result(None)

    def fail(error: Exception) -> None:
        on_error(error)
        finish()

    observable.subscribe(
        on_next=on_next,
        on_error=fail,
        on_completed=finish,
        scheduler=scheduler,
    )
    return finished


async def run_demo(
    *,
    rx_session: RxSwapiSession,
    future_session: FutureSwapiSession,
    request: FetchRequest,
    logger: LoggerProtocol,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    emit: Emit = print,
) -> None:
    """Run every presentation variant against ``request``.

    Args:
        rx_session: Rx adapter.
        future_session: Future adapter.
        request: Request shared by all variants.
        logger: Application logger.
        delay: Seconds used by the chaining helpers.
        emit: Output sink for the human-readable lines.
    """
    scheduler = AsyncIOScheduler(asyncio.get_running_loop())
    logger.info("demo_started", url=request.url, delay=delay)

    completable = reactivex.concat(
        rx_session.fetch_completable(request),
        reactivex.just("It worked"),
    ).pipe(
        ops.catch(
            lambda error, _: reactivex.just(f"The force is not with us: {error}")
        )
    )
    completable_done = _drain(
        completable,
        on_next=lambda value: emit(f"fetchCompletable: {value}"),
        on_error=lambda error: emit(f"fetchCompletable failed: {error}"),
        scheduler=scheduler,
    )

    single_done = _drain(
        rx_session.fetch_single(request),
        on_next=lambda value: emit(f"fetchSingle: {value}"),
        on_error=lambda error: emit(str(error)),
        scheduler=scheduler,
    )

    chained = rx_session.fetch_single(request).pipe(
        ops.flat_map(
            lambda name: maybe_after_delay(name, delay=delay, scheduler=scheduler)
        ),
        switch_if_empty(
            maybe_after_delay(FALLBACK_PERSON_NAME, delay=delay, scheduler=scheduler)
        ),
    )
    chained_done = _drain(
        chained,
        on_next=lambda value: emit(f"flatMapMaybe: {value}"),
        on_error=lambda error: emit(f"flatMapMaybe failed: {error}"),
        scheduler=scheduler,
    )

    await asyncio.gather(
        completable_done,
        single_done,
        chained_done,
        _await_future(future_session, request, emit=emit, logger=logger),
    )
    logger.info("demo_finished", url=request.url)


async def _await_future(
    session: FutureSwapiSession,
    request: FetchRequest,
    *,
    emit: Emit,
    logger: LoggerProtocol,
) -> None:
    try:
        value = await session.fetch_single(request)
    except FetchFailedError as e:
        logger.warning("demo_future_failed", error_code=e.error.code.value)
        emit(f"Future failed: {e}")
        return
    emit(f"Future: {value}")
