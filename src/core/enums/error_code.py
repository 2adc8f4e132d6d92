"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Transport errors (SWAPI_TRANSPORT_*)
- Payload errors (SWAPI_NO_DATA, SWAPI_DECODE_FAILED)
- Validation errors (VALIDATION_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Transport errors (network, DNS, TLS, timeout, HTTP status)
    SWAPI_TRANSPORT_FAILED = "swapi_transport_failed"
    SWAPI_TRANSPORT_TIMEOUT = "swapi_transport_timeout"
    SWAPI_HTTP_STATUS = "swapi_http_status"

    # Payload errors
    SWAPI_NO_DATA = "swapi_no_data"
    SWAPI_DECODE_FAILED = "swapi_decode_failed"
