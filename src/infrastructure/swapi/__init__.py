"""Star Wars API infrastructure adapter.

Exports:
    SwapiClient: httpx-based implementation of PersonFetcherProtocol.
    decode_person: JSON payload to Person decoder.
"""

from src.infrastructure.swapi.person_decoder import decode_person
from src.infrastructure.swapi.swapi_client import SwapiClient

__all__ = ["SwapiClient", "decode_person"]
