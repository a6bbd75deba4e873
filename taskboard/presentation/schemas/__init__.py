"""Pydantic response schemas."""

from taskboard.presentation.schemas.capability_schemas import (
    CapabilitySummaryResponse,
)

__all__ = ["CapabilitySummaryResponse"]
