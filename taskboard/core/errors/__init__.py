"""Core errors package.

Usage:
    from taskboard.core.errors import DomainError
"""

from taskboard.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
