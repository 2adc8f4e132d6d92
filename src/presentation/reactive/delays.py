"""Delayed observables for demonstrating reactive chaining.

Each helper fires once after ``delay`` seconds on the given scheduler
(pass an ``AsyncIOScheduler`` when running inside an event loop).
"""

from typing import Any

import reactivex
from reactivex import Observable, abc
from reactivex import operators as ops

from src.core.constants import DEMO_DELAY_SECONDS_DEFAULT, OPENING_CRAWL_PREFIX


class DelayedError(Exception):
    """Error emitted by error_after_delay."""


def complete_after_delay(
    *,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    scheduler: abc.SchedulerBase | None = None,
) -> Observable[Any]:
    """Complete without emitting after ``delay`` seconds."""
    return reactivex.timer(delay, scheduler=scheduler).pipe(ops.ignore_elements())


def string_after_delay(
    value: str,
    *,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    scheduler: abc.SchedulerBase | None = None,
) -> Observable[str]:
    """Emit ``value`` once after ``delay`` seconds."""
    return reactivex.timer(delay, scheduler=scheduler).pipe(ops.map(lambda _: value))


def maybe_after_delay(
    value: str,
    *,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    scheduler: abc.SchedulerBase | None = None,
) -> Observable[str]:
    """Emit ``value`` prefixed with the opening crawl after ``delay`` seconds.

    Example:
        "Luke Skywalker" -> "Long ago in a galaxy far far away... Luke Skywalker"
    """
    return string_after_delay(
        f"{OPENING_CRAWL_PREFIX}{value}", delay=delay, scheduler=scheduler
    )


def empty_after_delay(
    value: str,
    *,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    scheduler: abc.SchedulerBase | None = None,
) -> Observable[str]:
    """Ignore ``value`` and complete empty after ``delay`` seconds."""
    return complete_after_delay(delay=delay, scheduler=scheduler)


def error_after_delay(
    *,
    delay: float = DEMO_DELAY_SECONDS_DEFAULT,
    scheduler: abc.SchedulerBase | None = None,
) -> Observable[str]:
    """Error with DelayedError after ``delay`` seconds."""
    return reactivex.timer(delay, scheduler=scheduler).pipe(
        ops.flat_map(lambda _: reactivex.throw(DelayedError("Reactive completions")))
    )
