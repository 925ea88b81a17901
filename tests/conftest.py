"""
conftest.py — Shared Test Fixtures for the lab services

Provides one FastAPI TestClient per service, each built from a fresh
application instance.

Called by: all test files via pytest autodiscovery
Depends on: lab_services.app.main (application factories)
"""

import pytest
from fastapi.testclient import TestClient

from lab_services.app.main import create_banking_app, create_my_service_app


@pytest.fixture()
def banking_client():
    """TestClient for the banking service."""
    with TestClient(create_banking_app()) as c:
        yield c


@pytest.fixture()
def my_service_client():
    """TestClient for my service."""
    with TestClient(create_my_service_app()) as c:
        yield c
