"""Request descriptor value object.

Immutable description of the single HTTP call the client performs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchRequest:
    """Immutable HTTP request descriptor.

    Attributes:
        url: Absolute URL of the resource.
        method: HTTP method (normalized to upper case).

    Raises:
        ValueError: If url or method is empty.

    Example:
        >>> FetchRequest(url="https://swapi.dev/api/people/1")
        FetchRequest(url='https://swapi.dev/api/people/1', method='GET')
        >>> FetchRequest(url="https://swapi.dev/api/people/1", method="get").method
        'GET'
    """

    url: str
    method: str = "GET"

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            ValueError: If url or method is empty.
        """
        if not self.url:
            raise ValueError("Request url cannot be empty")
        if not self.method:
            raise ValueError("Request method cannot be empty")
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "method", self.method.upper())
