"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured (message + key-value context) logs.
Adapters live in taskboard.infrastructure.logging.

Log Levels:
    - DEBUG: Per-decision authorization trail
    - INFO: Denials, startup events
    - WARNING: Suspicious but handled input
    - ERROR: Caller misuse, failed operations
    - CRITICAL: Engine cannot serve requests

Security:
    - NEVER log tokens, passwords or request bodies
    - Log identifiers and permission labels only

Usage:
    from taskboard.core.container import get_logger

    logger = get_logger()
    request_logger = logger.bind(user_id=user_id, org_id=org_id)
    request_logger.info("authorization_denied", permission="issues:update")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Messages are event names (snake_case); details go in context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type/error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level event (same arguments as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context attached to every event.

        The original logger is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
