"""structlog adapter for generator events.

Events go to stderr so that ``enumizer render`` can stream the rendered
module on stdout. The renderer depends on the environment: JSON lines under
testing/ci, plain key=value console output elsewhere.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
It wraps its own PrintLogger, so a host application keeps its structlog
configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _exception_fields(error: Exception | None) -> dict[str, str]:
    if error is None:
        return {}
    return {"error_type": type(error).__name__, "error_message": str(error)}


class ConsoleAdapter:
    """Structured stderr logger used by the generation pipeline.

    Args:
        use_json (bool): Render JSON lines instead of console output.
        level (str): Lowest level name that is emitted (case-insensitive).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        # Own processor chain; structlog.configure() is never called.
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stderr),
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_name="enumizer",
        )

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        # Skips __init__; the bound logger already carries the processor chain.
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event with optional exception details.

        Args:
            message (str): Event name.
            error (Exception | None): Adds error_type and error_message when given.
            **context: Structured key-value context.
        """
        self._logger.error(message, **context, **_exception_fields(error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event with optional exception details.

        Args:
            message (str): Event name.
            error (Exception | None): Adds error_type and error_message when given.
            **context: Structured key-value context.
        """
        self._logger.critical(message, **context, **_exception_fields(error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``.

        Returns:
            ConsoleAdapter: Adapter over the bound structlog logger.
        """
        return self._wrapping(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Same as bind()."""
        return self.bind(**context)
