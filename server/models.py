"""Response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str


class HealthResponse(BaseModel):
    status: str
    version: str
    online: int
    connections: int
