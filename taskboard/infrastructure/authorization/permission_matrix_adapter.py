"""Static-matrix implementation of AuthorizationProtocol.

Wraps the pure domain engine (permission table + decision function) and
adds the operational concerns the engine itself stays free of:
- Structured decision logging (denials at INFO, full trail at DEBUG)
- Conversion of caller misuse into Result failures

Following hexagonal architecture:
- Infrastructure implements domain protocol (AuthorizationProtocol)
- Presentation only sees the protocol
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from taskboard.core.enums import ErrorCode
from taskboard.core.result import Failure, Result, Success
from taskboard.domain.authorization import (
    PERMISSIONS,
    PermissionTable,
    grants_for_role,
    is_admin,
    is_allowed,
    lookup_grants,
)
from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.errors import AuthorizationConfigurationError
from taskboard.domain.value_objects import AccessQuery, ActionToken

if TYPE_CHECKING:
    from taskboard.domain.protocols.logger_protocol import LoggerProtocol


def _label(value: object) -> str:
    return value.value if isinstance(value, (UserRole, ResourceKind)) else str(value)


class PermissionMatrixAdapter:
    """Authorization adapter over the in-memory permission table.

    Stateless apart from read-only configuration, so one instance is
    shared by all request handlers.

    Attributes:
        _table: Permission table consulted for every decision.
        _logger: Structured logger.
        _log_denials: Emit "authorization_denied" at INFO.
        _log_decisions: Emit "authorization_check" at DEBUG for every decision.
    """

    def __init__(
        self,
        logger: "LoggerProtocol",
        *,
        table: PermissionTable = PERMISSIONS,
        log_denials: bool = True,
        log_decisions: bool = False,
    ) -> None:
        self._table = table
        self._logger = logger
        self._log_denials = log_denials
        self._log_decisions = log_decisions

    @property
    def table(self) -> PermissionTable:
        """Read-only permission table backing this adapter."""
        return self._table

    def lookup_grants(
        self,
        resource: ResourceKind | str,
        role: UserRole | str,
    ) -> frozenset[ActionToken]:
        return lookup_grants(resource, role, table=self._table)

    def grants_for_role(
        self,
        role: UserRole | str,
    ) -> Mapping[ResourceKind, frozenset[ActionToken]]:
        return grants_for_role(role, table=self._table)

    def is_allowed(self, query: AccessQuery) -> bool:
        """Decide the query and record the outcome.

        Args:
            query: Actor, resource, action and instance facts.

        Returns:
            bool: True if allowed, False if denied.
        """
        allowed = is_allowed(query, table=self._table)

        context = {
            "role": _label(query.role),
            "user_id": query.user_id,
            "resource": _label(query.resource),
            "action": str(query.action),
            "allowed": allowed,
        }
        if self._log_decisions:
            self._logger.debug(
                "authorization_check",
                admin_bypass=is_admin(query.role),
                **context,
            )
        if not allowed and self._log_denials:
            self._logger.info(
                "authorization_denied",
                owner_id=query.owner_id,
                assignee_id=query.assignee_id,
                **context,
            )

        return allowed

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
        """Build an AccessQuery from raw facts and decide it.

        Returns:
            Success(bool) for any decision, including denial.
            Failure(AuthorizationConfigurationError) when a required fact
            (role, user_id, resource, action) is missing.
        """
        try:
            query = AccessQuery(
                role=role,
                user_id=user_id,
                resource=resource,
                action=action,
                owner_id=owner_id,
                assignee_id=assignee_id,
            )
        except ValueError as e:
            self._logger.error(
                "authorization_misconfigured",
                error=e,
                role=_label(role),
                resource=_label(resource),
                action=str(action),
            )
            return Failure(
                error=AuthorizationConfigurationError(
                    code=ErrorCode.AUTHORIZATION_MISCONFIGURED,
                    message=str(e),
                    details={
                        "role": _label(role),
                        "user_id": str(user_id),
                        "resource": _label(resource),
                        "action": str(action),
                    },
                )
            )

        return Success(value=self.is_allowed(query))
