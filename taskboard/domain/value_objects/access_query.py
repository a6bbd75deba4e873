"""AccessQuery value object.

Per-check bundle of actor and resource facts handed to the decision
function. Built by the caller for a single check and then discarded.
"""

from dataclasses import dataclass
from typing import Any

from taskboard.domain.enums import ResourceKind, UserRole
from taskboard.domain.value_objects.action_token import ActionToken


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _normalize_id(value: Any) -> str | None:
    if _is_blank(value):
        return None
    return str(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessQuery:
    """Facts needed to decide one authorization check.

    Role, resource and action may be enum members / tokens or plain
    strings; unrecognized strings are legal and evaluate to a denial.
    Identifiers are compared in string form, so UUID and str ids of the
    same entity match. Blank owner/assignee ids are treated as absent.

    Attributes:
        role: Acting user's role.
        user_id: Acting user's identifier.
        resource: Resource kind being accessed.
        action: Requested action ("update", "update_assigned", ...).
        owner_id: Owner/reporter of the specific instance, if loaded.
        assignee_id: Assignee of the specific instance, if loaded.

    Raises:
        ValueError: If role, user_id, resource or action is missing. This
            is a defect in the calling code, not an authorization outcome.
    """

    role: UserRole | str
    user_id: str
    resource: ResourceKind | str
    action: ActionToken | str
    owner_id: str | None = None
    assignee_id: str | None = None

    def __post_init__(self) -> None:
        """Validate required fields and normalize identifiers.

        Raises:
            ValueError: If a required field is missing or blank.
        """
        missing = [
            name
            for name in ("role", "user_id", "resource", "action")
            if _is_blank(getattr(self, name))
        ]
        if missing:
            raise ValueError(
                f"AccessQuery missing required field(s): {', '.join(missing)}"
            )

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "user_id", str(self.user_id))
        object.__setattr__(self, "owner_id", _normalize_id(self.owner_id))
        object.__setattr__(self, "assignee_id", _normalize_id(self.assignee_id))

