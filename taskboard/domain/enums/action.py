"""Action vocabulary: base verbs and scope qualifiers.

An action token is a verb optionally narrowed by a scope qualifier,
written ``verb`` or ``verb_qualifier`` (e.g. ``update_assigned``).

Scope Qualifiers:
    OWNER facts (actor must be the owner/reporter):
        - SELF, OWN
    ASSIGNEE facts (actor must be the assignee):
        - ASSIGNED
    Caller pre-filtered (breadth grant, membership checked upstream):
        - TEAM, ALL, PROJECT

Declaration order of ScopeQualifier is the resolution order.
"""

from enum import Enum


class ActionVerb(str, Enum):
    """Base verbs that can be performed on resources."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    START = "start"
    COMPLETE = "complete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all verb values as strings."""
        return [verb.value for verb in cls]


class ScopeFact(str, Enum):
    """Instance fact a scope qualifier is tested against."""

    OWNER = "owner"
    ASSIGNEE = "assignee"
    PREFILTERED = "prefiltered"


class ScopeQualifier(str, Enum):
    """Suffixes narrowing an action to instances related to the actor."""

    SELF = "self"
    OWN = "own"
    ASSIGNED = "assigned"
    TEAM = "team"
    ALL = "all"
    PROJECT = "project"

    @property
    def fact(self) -> ScopeFact:
        """Instance fact this qualifier is resolved against.

        Returns:
            ScopeFact: OWNER, ASSIGNEE or PREFILTERED.
        """
        return _QUALIFIER_FACTS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all qualifier values as strings."""
        return [qualifier.value for qualifier in cls]


_QUALIFIER_FACTS = {
    ScopeQualifier.SELF: ScopeFact.OWNER,
    ScopeQualifier.OWN: ScopeFact.OWNER,
    ScopeQualifier.ASSIGNED: ScopeFact.ASSIGNEE,
    ScopeQualifier.TEAM: ScopeFact.PREFILTERED,
    ScopeQualifier.ALL: ScopeFact.PREFILTERED,
    ScopeQualifier.PROJECT: ScopeFact.PREFILTERED,
}
