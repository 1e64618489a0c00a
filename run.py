"""Entry point for the Contact Manager web application.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``contact_manager.app.core.config``), defaulting to ``0.0.0.0`` and
``3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_manager.app.core.config import settings
from contact_manager.app.main import app


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
    logging.getLogger(__name__).info("Listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
