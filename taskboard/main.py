"""
Main FastAPI application entry point.

The authorization service (and the permission table behind it) is wired
during lifespan startup, before the first request is served.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskboard.core.config import settings
from taskboard.presentation.routers import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: build the authorization service and log the loaded table.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from taskboard.core.container import get_authorization, get_logger
    from taskboard.domain.enums import ResourceKind, UserRole

    authorization = get_authorization()
    get_logger().info(
        "permission_table_loaded",
        resource_kinds=len(ResourceKind),
        roles=len(UserRole),
        grants=sum(
            len(authorization.lookup_grants(resource, role))
            for resource in ResourceKind
            for role in UserRole
        ),
    )

    yield


app = FastAPI(
    title=settings.app_name,
    description="Project tracker authorization backend",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(v1_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe.

    Returns:
        dict: Health status.
    """
    return {"status": "healthy"}
