"""
Pydantic schema for the service information payload.
"""

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Version and description of the greeting service."""

    version: str = Field(..., description="Service version string")
    description: str = Field(..., description="Human readable service description")
