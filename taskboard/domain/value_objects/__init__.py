"""Domain value objects.

Immutable values with validation at construction time.
"""

from taskboard.domain.value_objects.access_query import AccessQuery
from taskboard.domain.value_objects.action_token import ActionToken

__all__ = ["AccessQuery", "ActionToken"]
