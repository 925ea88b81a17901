"""Unified entry point for the banking service and my service.

This script launches both services concurrently, each on its own port.
It is intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and ports are read from the ``HOST``, ``BANKING_PORT`` and
``MY_SERVICE_PORT`` environment variables (see
``lab_services.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from lab_services.app.core.config import settings
from lab_services.app.core.logging_config import setup_logging
from lab_services.app.main import banking_app, my_service_app

logger = logging.getLogger(__name__)


def build_server(app, port: int) -> Server:
    """Wrap ``app`` in a uvicorn server bound to ``settings.host:port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def run_banking() -> None:
    """Serve the banking service."""
    logger.info("Starting banking service on %s:%s", settings.host, settings.banking_port)
    await build_server(banking_app, settings.banking_port).serve()


async def run_my_service() -> None:
    """Serve my service."""
    logger.info("Starting my service on %s:%s", settings.host, settings.my_service_port)
    await build_server(my_service_app, settings.my_service_port).serve()


async def main() -> None:
    """Run both services concurrently."""
    setup_logging(settings.log_level, settings.log_file or None)
    tasks = [asyncio.create_task(run_banking()), asyncio.create_task(run_my_service())]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logger.error("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
