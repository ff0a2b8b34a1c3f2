"""Entry point for the Restaurant API server.

Starts the FastAPI application (REST and GraphQL surfaces) with
Uvicorn.  Host and port are read from ``API_HOST`` and ``API_PORT``
(defaults ``0.0.0.0`` and ``8000``); see
``restaurant_api/app/core/config.py`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from restaurant_api.app.core.config import settings
from restaurant_api.app.main import app


async def run_api() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s", settings.project_name, settings.host, settings.port
    )
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
