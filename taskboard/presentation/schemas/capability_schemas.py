"""Capability summary schemas."""

from pydantic import BaseModel, ConfigDict, Field

from taskboard.domain.enums import UserRole


class CapabilitySummaryResponse(BaseModel):
    """What the current actor's role may attempt, per resource kind.

    Scoped actions (``update_assigned``, ``read_own``) still depend on
    the specific instance; clients use this to show or hide controls.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "EMPLOYEE",
                "is_admin": False,
                "permissions": {
                    "issues": ["create", "delete_own", "read", "update_assigned"],
                    "settings": [],
                },
            }
        }
    )

    role: UserRole = Field(..., description="Actor's role")
    is_admin: bool = Field(
        ..., description="True when the role bypasses every permission check"
    )
    permissions: dict[str, list[str]] = Field(
        ..., description="Resource kind -> granted action tokens (sorted)"
    )
