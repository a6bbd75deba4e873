"""Logging adapters implementing LoggerProtocol."""

from taskboard.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
