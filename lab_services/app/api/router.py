"""
Top‑level routers, one per service.

The banking service and my service are deployed as separate
applications, so their endpoint routers are aggregated separately.
When new endpoints are added, include them in the router of the
service that owns them.
"""

from fastapi import APIRouter

from .endpoints import balance, hello, info

banking_router = APIRouter()
banking_router.include_router(balance.router, tags=["balance"])

my_service_router = APIRouter()
my_service_router.include_router(hello.router, tags=["hello"])
my_service_router.include_router(info.router, tags=["info"])
