"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, FetchFailedError
"""

from src.core.errors.domain_error import DomainError
from src.core.errors.fetch_failed_error import FetchFailedError

__all__ = [
    "DomainError",
    "FetchFailedError",
]
