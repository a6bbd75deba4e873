"""User roles for RBAC authorization.

Each actor holds exactly one role, assigned at the system boundary and
never changed during a request.

Roles:
    - ADMIN: Unconditional access (the only bypass in the engine)
    - PROJECT_MANAGER: Manages users, projects, settings and reports
    - SCRUM_MASTER: Runs sprints and the issue backlog
    - EMPLOYEE: Works assigned issues, owns comments and time entries
    - CLIENT: External stakeholder with project-limited visibility

Usage:
    from taskboard.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization. Values are the
        upper-case role names carried in tokens and API payloads.
    """

    ADMIN = "ADMIN"
    """Administrator with unconditional access to every resource and action."""

    PROJECT_MANAGER = "PROJECT_MANAGER"
    """Project manager: user, project and sprint management, org reports."""

    SCRUM_MASTER = "SCRUM_MASTER"
    """Scrum master: sprint lifecycle and backlog management."""

    EMPLOYEE = "EMPLOYEE"
    """Team member: works assigned issues, logs own time."""

    CLIENT = "CLIENT"
    """External client: reads assigned projects, files and edits own issues."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
