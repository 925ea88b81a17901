"""
Information endpoint for my service.

The payload is a static two-key map holding the service version and a
short description.  A new object is built for every request so that no
caller can observe changes made by another.
"""

from fastapi import APIRouter

from lab_services.app.schemas.info import ServiceInfo

router = APIRouter()

INFO_VERSION = "1.0.0"
INFO_DESCRIPTION = "My Spring Boot Microservice"


@router.get("/info", response_model=ServiceInfo)
async def get_info() -> ServiceInfo:
    """Return the version and description of the service."""
    return ServiceInfo(version=INFO_VERSION, description=INFO_DESCRIPTION)
