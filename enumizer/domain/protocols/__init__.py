"""Domain protocols."""

from enumizer.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
