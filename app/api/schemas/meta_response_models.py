"""Response models for meta API endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response model for health check."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"status": "ok", "repository_backend": "memory"}]}
    )

    status: str = Field(..., description="Service status", examples=["ok"])
    repository_backend: str = Field(
        ..., description="Storage backend serving the catalog and activity", examples=["memory"]
    )
