"""Runtime environment types.

Defines the environments enumizer runs under. Used by Settings and the
container to pick logging output.

Environments:
- DEVELOPMENT: Interactive use, human-readable console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Build pipelines rendering alias modules
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
