"""Custom reactivex operators."""

from collections.abc import Callable

import reactivex
from reactivex import Observable, abc
from reactivex.disposable import CompositeDisposable, SingleAssignmentDisposable


def switch_if_empty[T](
    other: Observable[T],
) -> Callable[[Observable[T]], Observable[T]]:
    """Continue with ``other`` when the source completes without items.

    Errors from the source pass through; ``other`` is only subscribed
    after an empty completion.

    Example:
        >>> source.pipe(switch_if_empty(reactivex.just("fallback")))
    """

    def _switch_if_empty(source: Observable[T]) -> Observable[T]:
        def subscribe(
            observer: abc.ObserverBase[T],
            scheduler: abc.SchedulerBase | None = None,
        ) -> abc.DisposableBase:
            source_subscription = SingleAssignmentDisposable()
            fallback_subscription = SingleAssignmentDisposable()
            has_value = False

            def on_next(value: T) -> None:
                nonlocal has_value
                has_value = True
                observer.on_next(value)

            def on_completed() -> None:
                if has_value:
                    observer.on_completed()
                    return
                fallback_subscription.disposable = other.subscribe(
                    observer, scheduler=scheduler
                )

            # The source may complete synchronously, before this assignment.
            source_subscription.disposable = source.subscribe(
                on_next, observer.on_error, on_completed, scheduler=scheduler
            )
            return CompositeDisposable(source_subscription, fallback_subscription)

        return reactivex.create(subscribe)

    return _switch_if_empty
