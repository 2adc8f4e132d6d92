"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import SwapiError, TransportError, DecodeError
"""

from src.domain.errors.swapi_error import (
    DecodeError,
    NoDataError,
    SwapiError,
    TransportError,
)

__all__ = [
    "SwapiError",
    "TransportError",
    "NoDataError",
    "DecodeError",
]
