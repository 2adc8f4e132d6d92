"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, PersonFetcherProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.person_fetcher_protocol import PersonFetcherProtocol

__all__ = [
    "LoggerProtocol",
    "PersonFetcherProtocol",
]
