"""Star Wars API client.

Implements PersonFetcherProtocol on top of httpx:
- HTTP request execution with timeout/connection error handling
- Response status interpretation (anything outside 2xx is a transport failure)
- Empty body detection
- JSON decoding into Person (delegated to person_decoder)
- Structured logging with request context

Every method returns a Result; nothing expected is raised. Cancelling the
task awaiting a fetch aborts the in-flight httpx request.

Architecture:
    - Infrastructure layer (adapter for an external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

import httpx
import structlog

from src.core.constants import REQUEST_TIMEOUT_DEFAULT, SWAPI_PEOPLE_PATH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.person import Person
from src.domain.errors import NoDataError, SwapiError, TransportError
from src.domain.value_objects.fetch_request import FetchRequest
from src.infrastructure.swapi.person_decoder import decode_person


class SwapiClient:
    """HTTP client for the Star Wars API.

    Each fetch opens and closes its own ``httpx.AsyncClient``, so concurrent
    fetches share no state.

    Attributes:
        _base_url: API root URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger.

    Example:
        >>> client = SwapiClient(base_url="https://swapi.dev/api")
        >>> request = client.person_request(1)
        >>> match await client.fetch_person(request):
        ...     case Success(value=person):
        ...         print(person.name)
        ...     case Failure(error=error):
        ...         print(error)
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Star Wars API client.

        Args:
            base_url: API root URL (e.g., "https://swapi.dev/api").
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = structlog.get_logger("swapi_api")

    def person_request(self, person_id: int) -> FetchRequest:
        """Build the request descriptor for one person resource.

        Args:
            person_id: Numeric person id (1 is Luke Skywalker).

        Returns:
            FetchRequest: GET request for ``{base_url}/people/{person_id}``.
        """
        return FetchRequest(url=f"{self._base_url}{SWAPI_PEOPLE_PATH}/{person_id}")

    async def fetch(self, request: FetchRequest) -> Result[bytes, SwapiError]:
        """Execute the request and return the raw body.

        Args:
            request: Request descriptor.

        Returns:
            Success(bytes): Non-empty response body.
            Failure(TransportError): On timeout, connection error or non-2xx status.
            Failure(NoDataError): On an empty body.
        """
        self._logger.debug(
            "swapi_api_request_started",
            method=request.method,
            url=request.url,
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True
            ) as client:
                response = await client.request(
                    method=request.method,
                    url=request.url,
                    headers={"Accept": "application/json"},
                )

        except httpx.TimeoutException as e:
            self._logger.warning(
                "swapi_api_timeout",
                url=request.url,
                error=str(e),
            )
            return Failure(
                error=TransportError(
                    code=ErrorCode.SWAPI_TRANSPORT_TIMEOUT,
                    message="request timed out",
                    url=request.url,
                    details={"timeout": self._timeout},
                )
            )

        except (httpx.RequestError, httpx.InvalidURL) as e:
            self._logger.warning(
                "swapi_api_connection_error",
                url=request.url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Failure(
                error=TransportError(
                    code=ErrorCode.SWAPI_TRANSPORT_FAILED,
                    message=str(e),
                    url=request.url,
                )
            )

        error_result = self._check_error_response(response, request)
        if error_result is not None:
            return error_result

        if not response.content:
            self._logger.warning("swapi_api_no_data", url=request.url)
            return Failure(
                error=NoDataError(
                    code=ErrorCode.SWAPI_NO_DATA,
                    message="No data",
                    url=request.url,
                )
            )

        self._logger.debug(
            "swapi_api_succeeded",
            url=request.url,
            size=len(response.content),
        )
        return Success(value=response.content)

    async def fetch_person(self, request: FetchRequest) -> Result[Person, SwapiError]:
        """Execute the request and decode the body into a Person.

        Combines fetch and decode_person for convenience.

        Args:
            request: Request descriptor.

        Returns:
            Success(Person): Decoded person.
            Failure(SwapiError): TransportError, NoDataError or DecodeError.
        """
        result = await self.fetch(request)
        if isinstance(result, Failure):
            return result

        return decode_person(result.value, url=request.url)

    def _check_error_response(
        self,
        response: httpx.Response,
        request: FetchRequest,
    ) -> Failure[SwapiError] | None:
        """Check HTTP status and return a TransportError for non-2xx.

        Args:
            response: HTTP response to check.
            request: Request that produced the response.

        Returns:
            Failure(TransportError) if status is not 2xx, None otherwise.
        """
        status = response.status_code

        if response.is_success:
            return None

        self._logger.warning(
            "swapi_api_http_error",
            url=request.url,
            status_code=status,
        )
        return Failure(
            error=TransportError(
                code=ErrorCode.SWAPI_HTTP_STATUS,
                message=f"Unexpected HTTP status {status}",
                url=request.url,
                status_code=status,
            )
        )
