"""Domain protocols (ports)."""

from taskboard.domain.protocols.authorization_protocol import AuthorizationProtocol
from taskboard.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["AuthorizationProtocol", "LoggerProtocol"]
