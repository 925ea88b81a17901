"""
Greeting endpoints for my service.

``/hello`` returns a fixed greeting while ``/greet/{name}`` echoes the
path segment back inside a greeting.  The name is used exactly as the
framework decoded it from the URL; no escaping is applied because the
response is plain text.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter()

HELLO_MESSAGE = "Hello, Spring Boot Microservice!"


def greeting_for(name: str) -> str:
    """Build the greeting for ``name``."""
    return f"Hello, {name}!"


@router.get("/hello", response_class=PlainTextResponse)
async def say_hello() -> str:
    """Return the service greeting."""
    return HELLO_MESSAGE


# An empty segment never matches ``{name}``, so it gets its own route.
@router.get("/greet/", response_class=PlainTextResponse)
async def greet_nobody() -> str:
    """Greet an empty name."""
    return greeting_for("")


@router.get("/greet/{name}", response_class=PlainTextResponse)
async def greet_by_name(name: str) -> str:
    """Greet ``name``, taken verbatim from the path."""
    logger.debug("Greeting %r", name)
    return greeting_for(name)
