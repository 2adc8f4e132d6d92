"""Exception bridge for errors leaving the Result world.

Reactive primitives only understand exceptions: ``observer.on_error`` and
``Future.set_exception`` both need one. FetchFailedError carries the
original DomainError untouched so subscribers can still match on its type.

Usage:
    match result:
        case Failure(error=error):
            observer.on_error(FetchFailedError(error))
"""

from src.core.errors.domain_error import DomainError


class FetchFailedError(Exception):
    """Exception wrapping a DomainError.

    Attributes:
        error: The wrapped domain error, unchanged.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error
