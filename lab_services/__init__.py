"""
Top‑level package for the lab services.

The package bundles two small REST services, the banking service and
"my service", which share configuration and logging helpers.  All
functionality lives in submodules under ``app``.
"""

__all__ = []
