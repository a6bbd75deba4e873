"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Settings

The core module has NO dependencies on other application layers.
"""

from taskboard.core.enums import ErrorCode
from taskboard.core.errors import DomainError
from taskboard.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
