"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import SWAPI_BASE_URL_DEFAULT
    >>> f"{SWAPI_BASE_URL_DEFAULT}/people/1"
    'https://swapi.dev/api/people/1'
"""

# =============================================================================
# Endpoints
# =============================================================================

SWAPI_BASE_URL_DEFAULT: str = "https://swapi.dev/api"
"""Public Star Wars API root."""

SWAPI_PEOPLE_PATH: str = "/people"
"""Path prefix for person resources."""


# =============================================================================
# Timeouts
# =============================================================================

REQUEST_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for outbound HTTP calls in seconds."""

DEMO_DELAY_SECONDS_DEFAULT: float = 3.0
"""Delay used by the chaining helpers in the demo."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""


# =============================================================================
# Demo Text
# =============================================================================

OPENING_CRAWL_PREFIX: str = "Long ago in a galaxy far far away... "
"""Prefix prepended by maybe_after_delay."""

FALLBACK_PERSON_NAME: str = "Nobody"
"""Name substituted when a maybe stream completes empty."""
