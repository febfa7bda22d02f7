"""Dependency factories.

Process-scoped singletons for ambient services:
- Settings (pydantic-settings)
- Logging (structlog console adapter)

Tests clear the caches with ``get_logger.cache_clear()`` after patching
settings.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from enumizer.core.config import get_settings

if TYPE_CHECKING:
    from enumizer.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - testing/ci: ConsoleAdapter (JSON)
    - development/production: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from enumizer.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.uses_json_logs, level=settings.log_level)
