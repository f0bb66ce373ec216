"""Application environment types.

- DEVELOPMENT: local development, human-readable logs
- TESTING: automated test execution
- CI: continuous integration
- PRODUCTION: production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
