"""Resource kinds protected by authorization.

Each resource kind is a category of domain object. Combined with an
action token to form permission checks (e.g. "issues:update_assigned").
"""

from enum import Enum


class ResourceKind(str, Enum):
    """Domain nouns subject to access control.

    Values are lowercase and double as route/handler identifiers.
    """

    USERS = "users"
    PROJECTS = "projects"
    SPRINTS = "sprints"
    ISSUES = "issues"
    COMMENTS = "comments"
    TIME_ENTRIES = "time_entries"
    REPORTS = "reports"
    SETTINGS = "settings"

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource kind values as strings.

        Returns:
            list[str]: List of resource kind values.
        """
        return [kind.value for kind in cls]
