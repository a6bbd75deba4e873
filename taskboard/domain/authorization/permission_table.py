"""Static permission table.

Declares, per resource kind, the action tokens each role may attempt,
independent of any specific resource instance. The table is the single
auditable statement of the permission surface; tests enumerate it cell
by cell.

Structure:
    ResourceKind -> UserRole -> frozenset[ActionToken]

The table is built once at import and exposed only through read-only
mapping proxies. Every resource kind carries an entry for every role
(possibly empty), so lookups are total.

Usage:
    from taskboard.domain.authorization import lookup_grants

    grants = lookup_grants("issues", "EMPLOYEE")
    # frozenset({create, read, update_assigned, delete_own})
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.value_objects import ActionToken

_FULL_CRUD = ("create", "read", "update", "delete")
_SPRINT_LIFECYCLE = (*_FULL_CRUD, "start", "complete")

_MATRIX: dict[ResourceKind, dict[UserRole, tuple[str, ...]]] = {
    # User management
    ResourceKind.USERS: {
        UserRole.ADMIN: _FULL_CRUD,
        UserRole.PROJECT_MANAGER: _FULL_CRUD,
        UserRole.SCRUM_MASTER: ("read",),
        UserRole.EMPLOYEE: ("read_self",),
        UserRole.CLIENT: (),
    },
    # Project management
    ResourceKind.PROJECTS: {
        UserRole.ADMIN: _FULL_CRUD,
        UserRole.PROJECT_MANAGER: _FULL_CRUD,
        UserRole.SCRUM_MASTER: ("read", "update"),
        UserRole.EMPLOYEE: ("read",),
        UserRole.CLIENT: ("read_assigned",),
    },
    # Sprint management
    ResourceKind.SPRINTS: {
        UserRole.ADMIN: _SPRINT_LIFECYCLE,
        UserRole.PROJECT_MANAGER: _SPRINT_LIFECYCLE,
        UserRole.SCRUM_MASTER: _SPRINT_LIFECYCLE,
        UserRole.EMPLOYEE: ("read",),
        UserRole.CLIENT: ("read",),
    },
    # Issues / stories
    ResourceKind.ISSUES: {
        UserRole.ADMIN: _FULL_CRUD,
        UserRole.PROJECT_MANAGER: _FULL_CRUD,
        UserRole.SCRUM_MASTER: _FULL_CRUD,
        UserRole.EMPLOYEE: ("create", "read", "update_assigned", "delete_own"),
        UserRole.CLIENT: ("create", "read", "update_own"),
    },
    # Comments
    ResourceKind.COMMENTS: {
        UserRole.ADMIN: _FULL_CRUD,
        UserRole.PROJECT_MANAGER: _FULL_CRUD,
        UserRole.SCRUM_MASTER: _FULL_CRUD,
        UserRole.EMPLOYEE: ("create", "read", "update_own", "delete_own"),
        UserRole.CLIENT: ("create", "read"),
    },
    # Time tracking
    ResourceKind.TIME_ENTRIES: {
        UserRole.ADMIN: _FULL_CRUD,
        UserRole.PROJECT_MANAGER: ("read_team",),
        UserRole.SCRUM_MASTER: ("read_team",),
        UserRole.EMPLOYEE: ("create", "read_own", "update_own", "delete_own"),
        UserRole.CLIENT: (),
    },
    # Reports
    ResourceKind.REPORTS: {
        UserRole.ADMIN: ("read_all",),
        UserRole.PROJECT_MANAGER: ("read_all",),
        UserRole.SCRUM_MASTER: ("read_team",),
        UserRole.EMPLOYEE: ("read_own",),
        UserRole.CLIENT: ("read_project",),
    },
    # Organization settings
    ResourceKind.SETTINGS: {
        UserRole.ADMIN: ("read", "update"),
        UserRole.PROJECT_MANAGER: ("read", "update"),
        UserRole.SCRUM_MASTER: (),
        UserRole.EMPLOYEE: (),
        UserRole.CLIENT: (),
    },
}

_NO_GRANTS: frozenset[ActionToken] = frozenset()

type GrantSet = frozenset[ActionToken]
type PermissionTable = Mapping[ResourceKind, Mapping[UserRole, GrantSet]]


def _parse_tokens(tokens: Iterable[str]) -> GrantSet:
    return frozenset(ActionToken.parse(token) for token in tokens)


def build_permission_table(
    matrix: Mapping[ResourceKind, Mapping[UserRole, Iterable[str]]],
) -> PermissionTable:
    """Build the read-only permission table from a raw matrix.

    Args:
        matrix: Resource kind -> role -> action strings.

    Returns:
        PermissionTable: Nested read-only mappings of parsed token sets.

    Raises:
        RuntimeError: If any resource kind lacks an entry for some role.
        ValueError: If an action string is not a valid token.
    """
    table: dict[ResourceKind, Mapping[UserRole, GrantSet]] = {}
    for resource, by_role in matrix.items():
        missing = [role.value for role in UserRole if role not in by_role]
        if missing:
            raise RuntimeError(
                f"Permission table entry '{resource.value}' missing roles: {missing}"
            )
        table[resource] = MappingProxyType(
            {role: _parse_tokens(by_role[role]) for role in UserRole}
        )
    return MappingProxyType(table)


PERMISSIONS: PermissionTable = build_permission_table(_MATRIX)


def _as_resource(resource: ResourceKind | str) -> ResourceKind | None:
    try:
        return ResourceKind(resource)
    except ValueError:
        return None


def _as_role(role: UserRole | str) -> UserRole | None:
    try:
        return UserRole(role)
    except ValueError:
        return None


def lookup_grants(
    resource: ResourceKind | str,
    role: UserRole | str,
    *,
    table: PermissionTable = PERMISSIONS,
) -> GrantSet:
    """Return the grant set for (resource kind, role).

    Never raises: unknown resource kinds and unknown roles yield the
    empty set.

    Args:
        resource: Resource kind (enum or string value).
        role: Role (enum or string value).
        table: Table to consult (defaults to the process-wide table).

    Returns:
        GrantSet: Granted action tokens, possibly empty.
    """
    kind = _as_resource(resource)
    user_role = _as_role(role)
    if kind is None or user_role is None:
        return _NO_GRANTS
    return table.get(kind, MappingProxyType({})).get(user_role, _NO_GRANTS)


def grants_for_role(
    role: UserRole | str,
    *,
    table: PermissionTable = PERMISSIONS,
) -> Mapping[ResourceKind, GrantSet]:
    """Return every resource kind's grant set for one role.

    Args:
        role: Role (enum or string value). Unknown roles map every
            resource kind to the empty set.
        table: Table to consult.

    Returns:
        Mapping[ResourceKind, GrantSet]: Read-only mapping.
    """
    return MappingProxyType(
        {resource: lookup_grants(resource, role, table=table) for resource in table}
    )


def has_grant(
    role: UserRole | str,
    resource: ResourceKind | str,
    action: ActionToken | str,
    *,
    table: PermissionTable = PERMISSIONS,
) -> bool:
    """Exact membership test: is this literal token in the grant set?

    No scope interpretation and no ADMIN bypass; use is_allowed() for
    authorization decisions.
    """
    try:
        token = ActionToken.coerce(action)
    except ValueError:
        return False
    return token in lookup_grants(resource, role, table=table)


def summarize_grants(grants: Mapping[ResourceKind, GrantSet]) -> dict[str, list[str]]:
    """Render a per-resource grant mapping as JSON-ready strings.

    Returns:
        dict[str, list[str]]: Resource kind value -> sorted action strings.
    """
    return {
        resource.value: sorted(str(token) for token in tokens)
        for resource, tokens in grants.items()
    }


def capability_summary(
    role: UserRole | str,
    *,
    table: PermissionTable = PERMISSIONS,
) -> dict[str, list[str]]:
    """JSON-ready capability summary for a role, used by UI clients."""
    return summarize_grants(grants_for_role(role, table=table))
