"""PersonFetcherProtocol - the single asynchronous result type.

Port (interface) for hexagonal architecture. The HTTP client implements
it; every reactive presentation variant adapts it. Keeping one coroutine
behind all variants means the fetch and decode logic exists exactly once.

Reference:
    - src/infrastructure/swapi/swapi_client.py (implementation)
    - src/presentation/reactive/ (adapters)
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from src.core.result import Result
    from src.domain.entities.person import Person
    from src.domain.errors import SwapiError
    from src.domain.value_objects.fetch_request import FetchRequest


class PersonFetcherProtocol(Protocol):
    """Fetches decoded persons for a request.

    fetch_person resolves exactly once with Success or Failure. It never
    raises for expected failures; cancelling the awaiting task aborts the
    in-flight request.
    """

    async def fetch_person(
        self, request: "FetchRequest"
    ) -> "Result[Person, SwapiError]":
        """Perform the request and decode the body into a Person.

        Returns:
            Success(Person): Decoded person.
            Failure(TransportError | NoDataError | DecodeError): On any failure.
        """
        ...
