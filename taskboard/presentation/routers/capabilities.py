"""Capability summary endpoints.

Endpoints:
    GET /me/capabilities - Grants of the current actor's role
    GET /organizations/{org_id}/roles/{role}/capabilities - Grants of any
        role, for organization settings screens
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from taskboard.core.container import get_authorization
from taskboard.domain.authorization import is_admin, summarize_grants
from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.protocols.authorization_protocol import AuthorizationProtocol
from taskboard.presentation.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from taskboard.presentation.middleware.authorization_dependencies import (
    require_organization_access,
    require_permission,
)
from taskboard.presentation.schemas import CapabilitySummaryResponse

router = APIRouter(tags=["Capabilities"])


def _summary(
    authorization: AuthorizationProtocol, role: UserRole
) -> CapabilitySummaryResponse:
    return CapabilitySummaryResponse(
        role=role,
        is_admin=is_admin(role),
        permissions=summarize_grants(authorization.grants_for_role(role)),
    )


@router.get(
    "/me/capabilities",
    response_model=CapabilitySummaryResponse,
    summary="Current actor's capabilities",
)
async def get_my_capabilities(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
) -> CapabilitySummaryResponse:
    """Return the static grant set of the actor's role for every resource kind."""
    return _summary(authorization, current_user.role)


@router.get(
    "/organizations/{org_id}/roles/{role}/capabilities",
    response_model=CapabilitySummaryResponse,
    summary="Capabilities of a role",
    dependencies=[
        Depends(require_organization_access),
        Depends(require_permission(ResourceKind.SETTINGS, "read")),
    ],
)
async def get_role_capabilities(
    org_id: str,
    role: UserRole,
    authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
) -> CapabilitySummaryResponse:
    """Return the grant set of ``role``; readable by settings readers of the org."""
    return _summary(authorization, role)
