"""Authorization infrastructure package.

- permission_matrix_adapter.py: PermissionMatrixAdapter implementing
  AuthorizationProtocol over the static permission table.
"""

from taskboard.infrastructure.authorization.permission_matrix_adapter import (
    PermissionMatrixAdapter,
)

__all__ = ["PermissionMatrixAdapter"]
