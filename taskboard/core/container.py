"""Centralized dependency injection (composition root).

Application-scoped singletons are created lazily with ``lru_cache`` and
shared by every request. Presentation code depends on the protocols
returned here, never on concrete adapters.

Usage:
    from taskboard.core.container import get_authorization, get_logger

    authz = get_authorization()
    allowed = authz.is_allowed(query)

    # FastAPI
    authz: AuthorizationProtocol = Depends(get_authorization)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from taskboard.core.config import settings

if TYPE_CHECKING:
    from taskboard.domain.protocols.authorization_protocol import (
        AuthorizationProtocol,
    )
    from taskboard.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from taskboard.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    ).bind(app=settings.app_name, environment=settings.environment.value)


# ============================================================================
# Authorization (Application-Scoped)
# ============================================================================


@lru_cache()
def get_authorization() -> "AuthorizationProtocol":
    """Return the application-scoped authorization service.

    The permission table is built at import of the domain package; this
    factory only wires the adapter. Call it during startup so the table
    is ready before the first request.

    Returns:
        AuthorizationProtocol: PermissionMatrixAdapter over the static table.
    """
    from taskboard.infrastructure.authorization.permission_matrix_adapter import (
        PermissionMatrixAdapter,
    )

    return PermissionMatrixAdapter(
        get_logger(),
        log_denials=settings.authz_log_denials,
        log_decisions=settings.authz_log_decisions,
    )
