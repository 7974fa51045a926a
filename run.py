"""Entry point for the Asgard API.

Serves ``asgard_api.app.main:app`` with uvicorn.  Host and port come
from the ``APP_HOST`` and ``APP_PORT`` environment variables (defaults
``127.0.0.1`` and ``8080``); the database location from
``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from asgard_api.app.core.config import settings
from asgard_api.app.main import app


async def main() -> None:
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
