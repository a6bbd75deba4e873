"""Domain enums for authorization.

Available Enums:
    - UserRole: RBAC roles (ADMIN ... CLIENT)
    - ResourceKind: Protected resource kinds
    - ActionVerb: Base verbs (create, read, update, ...)
    - ScopeQualifier: Scope suffixes (self, own, assigned, team, all, project)
    - ScopeFact: Instance fact a qualifier is tested against
"""

from taskboard.domain.enums.action import ActionVerb, ScopeFact, ScopeQualifier
from taskboard.domain.enums.resource_kind import ResourceKind
from taskboard.domain.enums.user_role import UserRole

__all__ = [
    "ActionVerb",
    "ResourceKind",
    "ScopeFact",
    "ScopeQualifier",
    "UserRole",
]
