"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Denials are not errors and have no code here.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Authorization errors
    AUTHORIZATION_MISCONFIGURED = "authorization_misconfigured"
