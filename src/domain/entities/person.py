"""Person domain entity.

The decoded record of a Star Wars API person resource. Only the name is
kept; every other field of the payload is ignored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person returned by the Star Wars API.

    Attributes:
        name: Display name exactly as sent by the API.

    Example:
        >>> Person(name="Luke Skywalker").name
        'Luke Skywalker'
    """

    name: str
