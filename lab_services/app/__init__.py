"""
Application package initializer.

Each service is assembled in ``main`` from its own router defined in
``api``.  The two services do not share state; they only share the
configuration and logging setup from ``core``.
"""

from .main import banking_app, my_service_app  # noqa: F401
