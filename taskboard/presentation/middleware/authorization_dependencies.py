"""Authorization dependencies.

FastAPI dependencies that turn engine decisions into HTTP responses.
Use them in addition to the authentication dependency.

Architecture:
    - Authentication (auth_dependencies.py): Who is the actor
    - Authorization (this file): May the actor do this

Route-level vs instance-level checks:
    require_permission() runs before the handler and knows no instance
    facts, so it only passes for grants that need none (unscoped or
    team/all/project breadth). Handlers guarding owner/assignee-scoped
    actions load the instance first and call ensure_allowed().

Usage:
    @router.post("/sprints/{sprint_id}/start")
    async def start_sprint(
        _: Annotated[None, Depends(require_permission("sprints", "start"))],
    ):
        ...

    @router.patch("/issues/{issue_id}")
    async def update_issue(
        issue_id: str,
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
    ):
        issue = await issues.get(issue_id)
        ensure_allowed(
            current_user,
            authorization,
            resource="issues",
            action="update",
            owner_id=issue.reporter_id,
            assignee_id=issue.assignee_id,
        )
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from taskboard.core.container import get_authorization
from taskboard.core.result import Failure, Success
from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.protocols.authorization_protocol import AuthorizationProtocol
from taskboard.domain.value_objects import ActionToken
from taskboard.presentation.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


def _permission_label(resource: ResourceKind | str, action: ActionToken | str) -> str:
    name = resource.value if isinstance(resource, ResourceKind) else resource
    return f"{name}:{action}"


def ensure_allowed(
    current_user: CurrentUser,
    authorization: AuthorizationProtocol,
    *,
    resource: ResourceKind | str,
    action: ActionToken | str,
    owner_id: str | None = None,
    assignee_id: str | None = None,
) -> None:
    """Raise unless the actor may perform the action on this instance.

    Args:
        current_user: Authenticated actor.
        authorization: Authorization service.
        resource: Resource kind.
        action: Requested action.
        owner_id: Owner/reporter of the loaded instance.
        assignee_id: Assignee of the loaded instance.

    Raises:
        HTTPException 403: If the decision is a denial.
        HTTPException 500: If the check itself is malformed.
    """
    result = authorization.evaluate(
        role=current_user.role,
        user_id=current_user.user_id,
        resource=resource,
        action=action,
        owner_id=owner_id,
        assignee_id=assignee_id,
    )

    match result:
        case Success(value=True):
            return
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Authorization misconfigured: {error.message}",
            )

    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"Permission denied: {_permission_label(resource, action)}",
    )


def require_permission(
    resource: ResourceKind | str,
    action: ActionToken | str,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires an instance-independent permission.

    Args:
        resource: Resource kind (users, projects, sprints, ...).
        action: Action name (create, read, start, read_all, ...).

    Returns:
        Dependency function that validates the actor's permission.

    Raises:
        HTTPException 403: If the actor's role does not allow the action.
    """

    async def permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
    ) -> None:
        ensure_allowed(
            current_user,
            authorization,
            resource=resource,
            action=action,
        )

    return permission_checker


def require_role(*roles: UserRole) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires one of the given roles.

    Coarse gate for whole route groups (e.g. the client portal).

    Raises:
        HTTPException 403: If the actor's role is not listed.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> None:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )

    return role_checker


require_admin = require_role(UserRole.ADMIN)
require_admin_or_scrum_master = require_role(UserRole.ADMIN, UserRole.SCRUM_MASTER)


async def require_organization_access(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    org_id: str | None = None,
) -> None:
    """Reject access to another tenant's organization.

    ``org_id`` is taken from the path or query string. Requests that name
    no organization pass; ADMIN may cross organizations.

    Raises:
        HTTPException 403: If a non-admin names a foreign organization.
    """
    if org_id and org_id != current_user.org_id and current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this organization",
        )
