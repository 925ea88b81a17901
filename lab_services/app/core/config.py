"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
services start without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    banking_service_name: str = os.getenv("BANKING_SERVICE_NAME", "Banking Service")
    my_service_name: str = os.getenv("MY_SERVICE_NAME", "My Service")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Both services bind to the same host on different ports when they
    # are launched together by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    banking_port: int = int(os.getenv("BANKING_PORT", "8080"))
    my_service_port: int = int(os.getenv("MY_SERVICE_PORT", "8081"))


# Environment variables must be set before importing this module.
settings = Settings()
