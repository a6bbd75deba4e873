"""Authenticated-actor dependencies.

Token verification is done upstream by the authentication layer, which
places a ``CurrentUser`` on ``request.state.current_user``. These
dependencies only read it.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ):
        return {"user_id": current_user.user_id}
"""

from dataclasses import dataclass

from fastapi import HTTPException, Request, status

from taskboard.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated actor.

    Attributes:
        user_id: User's unique identifier.
        email: User's email address.
        role: User's single role.
        org_id: Organization (tenant) the user belongs to.
    """

    user_id: str
    email: str
    role: UserRole
    org_id: str


async def get_current_user(request: Request) -> CurrentUser:
    """Get the authenticated actor for this request.

    Raises:
        HTTPException 401: If the authentication layer attached no user.
    """
    current_user = getattr(request.state, "current_user", None)
    if not isinstance(current_user, CurrentUser):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user

