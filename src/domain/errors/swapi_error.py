"""Star Wars API error types.

These errors are part of the PersonFetcherProtocol contract: they are the
only failure cases a fetch can return.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- Never retried; forwarded unchanged to the consumer

Usage:
    from src.domain.errors import SwapiError, DecodeError
    from src.core.result import Result, Success, Failure

    def decode(payload: bytes) -> Result[Person, SwapiError]:
        if not valid:
            return Failure(error=DecodeError(...))
        return Success(value=person)
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SwapiError(DomainError):
    """Base Star Wars API error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        url: URL of the request that failed.
        details: Additional context.
    """

    url: str | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(SwapiError):
    """The request never produced a usable response.

    Raised when:
    - Connection is refused or reset
    - DNS resolution fails
    - SSL/TLS handshake fails
    - Request times out
    - Server answers with a non-2xx status

    Attributes:
        code: Domain ErrorCode (SWAPI_TRANSPORT_*, SWAPI_HTTP_STATUS).
        message: Message of the underlying transport failure.
        status_code: HTTP status when the server answered, else None.
    """

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NoDataError(SwapiError):
    """Transport succeeded but the response body was empty.

    Attributes:
        code: Domain ErrorCode (SWAPI_NO_DATA).
        message: Human-readable message.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeError(SwapiError):
    """Response body is not a JSON object with a string ``name``.

    Raised when:
    - Body is not valid JSON
    - Top-level value is not an object
    - ``name`` is missing or not a string

    Attributes:
        code: Domain ErrorCode (SWAPI_DECODE_FAILED).
        message: Human-readable message.
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None
