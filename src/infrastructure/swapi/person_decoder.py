"""Person payload decoder.

Converts raw Star Wars API response bytes into a Person entity. Contains
the only knowledge of the payload's JSON structure.

Response Structure (fields other than ``name`` are ignored):
    {
        "name": "Luke Skywalker",
        "height": "172",
        "films": ["https://swapi.dev/api/films/1/", ...],
        ...
    }
"""

import structlog
from pydantic import ValidationError

from src.core.constants import RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.person import Person
from src.domain.errors import DecodeError
from src.schemas.person_schemas import PersonPayload

logger = structlog.get_logger(__name__)


def decode_person(
    payload: bytes, *, url: str | None = None
) -> Result[Person, DecodeError]:
    """Decode a JSON payload into a Person.

    Args:
        payload: Raw response body.
        url: Request URL, attached to the error for context.

    Returns:
        Success(Person): ``name`` copied unchanged from the payload.
        Failure(DecodeError): Invalid JSON, non-object body, or missing/non-string
            ``name``.

    Example:
        >>> decode_person(b'{"name": "Luke Skywalker"}')
        Success(value=Person(name='Luke Skywalker'))
    """
    try:
        parsed = PersonPayload.model_validate_json(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(
            "swapi_person_decode_failed",
            url=url,
            error_count=e.error_count(),
        )
        return Failure(
            error=DecodeError(
                code=ErrorCode.SWAPI_DECODE_FAILED,
                message=f"Response is not a valid person: {problems}",
                url=url,
                response_body=payload[:RESPONSE_BODY_MAX_LENGTH].decode(
                    "utf-8", errors="replace"
                ),
            )
        )

    return Success(value=Person(name=parsed.name))
