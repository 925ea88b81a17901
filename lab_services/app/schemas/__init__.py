"""Pydantic schemas used by the service endpoints."""

from .info import ServiceInfo  # noqa: F401
