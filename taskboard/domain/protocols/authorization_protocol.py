"""Authorization protocol (port) for role-and-ownership access control.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides ADAPTERS (PermissionMatrixAdapter)
- Presentation uses the protocol via dependency injection

Usage:
    from taskboard.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = Depends(get_authorization)
    allowed = authz.is_allowed(query)
"""

from collections.abc import Mapping
from typing import Protocol

from taskboard.core.result import Result
from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.errors import AuthorizationConfigurationError
from taskboard.domain.value_objects import AccessQuery, ActionToken


class AuthorizationProtocol(Protocol):
    """Protocol for authorization engines.

    All methods are synchronous and free of I/O; they may be called from
    any number of concurrent request handlers.

    Error Handling:
        Decisions return bool (fail-closed design). Unknown roles, resource
        kinds and missing instance facts deny; they are not errors.
    """

    def lookup_grants(
        self,
        resource: ResourceKind | str,
        role: UserRole | str,
    ) -> frozenset[ActionToken]:
        """Return the tokens a role holds on a resource kind.

        Args:
            resource: Resource kind.
            role: Role.

        Returns:
            frozenset[ActionToken]: Granted tokens; empty when unknown.
        """
        ...

    def is_allowed(self, query: AccessQuery) -> bool:
        """Decide a single authorization check.

        Args:
            query: Actor, resource, action and instance facts.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def grants_for_role(
        self,
        role: UserRole | str,
    ) -> Mapping[ResourceKind, frozenset[ActionToken]]:
        """Return the role's grants for every resource kind.

        Used to build UI-facing capability summaries.
        """
        ...

    def evaluate(
        self,
        *,
        role: UserRole | str,
        user_id: str,
        resource: ResourceKind | str,
        action: ActionToken | str,
        owner_id: str | None = None,
        assignee_id: str | None = None,
    ) -> Result[bool, AuthorizationConfigurationError]:
        """Build the query from raw facts and decide it.

        Returns:
            Success(bool) for any decision (including denial);
            Failure(AuthorizationConfigurationError) when required facts
            are missing.
        """
        ...
