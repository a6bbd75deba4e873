"""Core enums package.

Usage:
    from taskboard.core.enums import ErrorCode, Environment
"""

from taskboard.core.enums.environment import Environment
from taskboard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
