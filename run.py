"""Entry point for serving the Users API.

Runs the FastAPI application with Uvicorn.  Host, port and log level
come from ``users_api.app.core.config.settings`` and can be overridden
with the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def main() -> None:
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


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
