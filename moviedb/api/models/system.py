"""
Pydantic schemas for system endpoints.
"""

from pydantic import BaseModel


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
    system_info: SystemInfo
