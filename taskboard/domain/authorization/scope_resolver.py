"""Scope resolution for qualified action tokens.

Given a token already confirmed present in a grant set, decide whether a
specific resource instance qualifies. Missing facts never qualify.

Rules (first match wins, in ScopeQualifier order):
    - no qualifier: always qualifies
    - self / own: actor is the owner
    - assigned: actor is the assignee
    - team / all / project: qualifies; the caller has already limited the
      instances to the actor's team/project before asking
"""

from taskboard.domain.enums import ScopeFact
from taskboard.domain.value_objects import ActionToken


def _same_actor(user_id: str, other_id: str | None) -> bool:
    return other_id is not None and user_id == other_id


def scope_qualifies(
    token: ActionToken,
    *,
    user_id: str,
    owner_id: str | None = None,
    assignee_id: str | None = None,
) -> bool:
    """Check whether an instance satisfies the token's scope qualifier.

    Args:
        token: Granted action token.
        user_id: Acting user's identifier.
        owner_id: Instance owner/reporter id, None if not loaded.
        assignee_id: Instance assignee id, None if not loaded.

    Returns:
        bool: True if the instance qualifies.
    """
    if token.scope is None:
        return True

    match token.scope.fact:
        case ScopeFact.OWNER:
            return _same_actor(user_id, owner_id)
        case ScopeFact.ASSIGNEE:
            return _same_actor(user_id, assignee_id)
        case ScopeFact.PREFILTERED:
            return True
    return False
