"""Authorization domain errors.

Denials are plain ``False`` results and never errors. The only
authorization failure carried as an error is caller misuse: a check
requested without the facts every check needs.
"""

from dataclasses import dataclass

from taskboard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationConfigurationError(DomainError):
    """Authorization check could not be evaluated (caller defect).

    Attributes:
        code: ErrorCode.AUTHORIZATION_MISCONFIGURED.
        message: Human-readable explanation.
        details: Offending field values (stringified).
    """

    pass
