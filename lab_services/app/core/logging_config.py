"""
Logging setup shared by the banking service and my service.

Both services run in one process under ``run.py`` and each application
factory asks for logging on its own, so ``setup_logging`` only touches
the root logger the first time.  uvicorn's loggers keep their own
handlers; only their level follows the configured one.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, ``INFO`` if unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _service_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the services.

    Parameters
    ----------
    level : str
        Level name, case insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file written next to the console output.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)
    for handler in _service_handlers(logfile):
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
    root.debug("Logging configured at %s", logging.getLevelName(numeric_level))
