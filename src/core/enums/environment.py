"""Application environment types.

Used by Settings to pick the logging renderer and other per-environment
behavior.

Environments:
- DEVELOPMENT: Local runs with human-readable console logs
- TESTING: Automated test execution (JSON logs)
- CI: Continuous integration environment (JSON logs)
- PRODUCTION: Deployed runs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
