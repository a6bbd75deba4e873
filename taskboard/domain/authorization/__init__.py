"""Authorization engine: permission table, scope resolver, decision function.

Usage:
    from taskboard.domain.authorization import is_allowed
    from taskboard.domain.value_objects import AccessQuery

    allowed = is_allowed(AccessQuery(
        role="EMPLOYEE",
        user_id=user.id,
        resource="issues",
        action="update",
        assignee_id=issue.assignee_id,
    ))
"""

from taskboard.domain.authorization.decision import is_admin, is_allowed
from taskboard.domain.authorization.permission_table import (
    PERMISSIONS,
    GrantSet,
    PermissionTable,
    build_permission_table,
    capability_summary,
    grants_for_role,
    has_grant,
    lookup_grants,
    summarize_grants,
)
from taskboard.domain.authorization.scope_resolver import scope_qualifies

__all__ = [
    "PERMISSIONS",
    "GrantSet",
    "PermissionTable",
    "build_permission_table",
    "capability_summary",
    "grants_for_role",
    "has_grant",
    "is_admin",
    "is_allowed",
    "lookup_grants",
    "scope_qualifies",
    "summarize_grants",
]
