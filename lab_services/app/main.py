"""
Main entrypoint for the lab services.

This module assembles one FastAPI application per service, sets up
logging and includes the service routers.  The factories build and
configure the apps, which are then instantiated at module import time
as ``banking_app`` and ``my_service_app``.  Either can be served on its
own with uvicorn, e.g.::

    uvicorn lab_services.app.main:banking_app --port 8080
    uvicorn lab_services.app.main:my_service_app --port 8081

Titles and the version are provided via ``Settings`` from ``core.config``.
"""

import logging

from fastapi import APIRouter, FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import banking_router, my_service_router

logger = logging.getLogger(__name__)


def _build_app(title: str, router: APIRouter) -> FastAPI:
    # Initialise logging before anything else so that the routers can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=title, version=settings.api_version, debug=settings.debug)
    app.include_router(router)
    logger.debug("Application %s created", title)
    return app


def create_banking_app() -> FastAPI:
    """Create and configure the banking service application.

    Returns
    -------
    FastAPI
        A configured FastAPI application exposing ``GET /balance``.
    """
    return _build_app(settings.banking_service_name, banking_router)


def create_my_service_app() -> FastAPI:
    """Create and configure the greeting service application.

    Returns
    -------
    FastAPI
        A configured FastAPI application exposing ``GET /hello``,
        ``GET /greet/{name}`` and ``GET /info``.
    """
    return _build_app(settings.my_service_name, my_service_router)


# Create the application instances at import time so that tools such as
# uvicorn can discover them without calling the factories manually.
banking_app = create_banking_app()
my_service_app = create_my_service_app()
