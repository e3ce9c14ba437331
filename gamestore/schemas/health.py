"""Body of GET /api/health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["OK", "DEGRADED"]
    message: str = Field(description="'API is healthy', or what is failing.")
    service: str
    version: str
    environment: str = Field(description="APP_ENV of the running process.")
    database: Literal["connected", "disconnected"]
