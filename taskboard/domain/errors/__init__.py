"""Domain-specific errors."""

from taskboard.domain.errors.authorization_error import (
    AuthorizationConfigurationError,
)

__all__ = ["AuthorizationConfigurationError"]
