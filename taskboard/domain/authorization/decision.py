"""Authorization decision function.

Composes the permission table and the scope resolver into one verdict.

Algorithm:
    1. ADMIN is allowed unconditionally.
    2. Collect granted tokens sharing the requested verb; none -> deny.
    3. An unscoped grant for the verb -> allow.
    4. Otherwise allow iff some scoped grant for the verb qualifies.

The requested action's own qualifier is not consulted: the grant decides
how the instance is scoped. Unknown roles, resource kinds and actions
deny. The function is pure over its input and the static table.
"""

from taskboard.domain.authorization.permission_table import (
    PERMISSIONS,
    PermissionTable,
    lookup_grants,
)
from taskboard.domain.authorization.scope_resolver import scope_qualifies
from taskboard.domain.enums import UserRole
from taskboard.domain.value_objects import AccessQuery, ActionToken


def is_admin(role: UserRole | str) -> bool:
    """True for the ADMIN role (enum member or its string value)."""
    return role == UserRole.ADMIN


def is_allowed(query: AccessQuery, *, table: PermissionTable = PERMISSIONS) -> bool:
    """Decide whether the query's actor may perform the action.

    Args:
        query: Actor, resource and instance facts for this check.
        table: Permission table to consult.

    Returns:
        bool: True if allowed, False otherwise (fail-closed).
    """
    if is_admin(query.role):
        return True

    try:
        requested = ActionToken.coerce(query.action)
    except ValueError:
        return False

    candidates = [
        token
        for token in lookup_grants(query.resource, query.role, table=table)
        if token.verb == requested.verb
    ]
    if not candidates:
        return False

    if any(not token.is_scoped for token in candidates):
        return True

    return any(
        scope_qualifies(
            token,
            user_id=query.user_id,
            owner_id=query.owner_id,
            assignee_id=query.assignee_id,
        )
        for token in candidates
    )
