"""Pydantic models for webhook responses."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
