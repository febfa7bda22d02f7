"""Structured logging port.

The pipeline logs through this protocol and never imports structlog
directly; ``enumizer.core.container.get_logger`` supplies the adapter.

Events used by the generator:
    - DEBUG ``alias_source``: rendered class source (opt-in via settings)
    - INFO ``alias_generated`` / ``module_rendered``
    - WARNING ``alias_generation_failed``

Usage:
    logger = get_logger().bind(type_name="Lookup")
    logger.info("alias_generated", family="option")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Event name plus keyword context; no preformatted messages."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message: Event name.
            error: Exception whose type and text are added to the context.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event; ``error`` is handled as in error()."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The receiver is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...
