"""API routers."""

from fastapi import APIRouter

from taskboard.core.config import settings
from taskboard.presentation.routers.capabilities import router as capabilities_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(capabilities_router)

__all__ = ["v1_router"]
