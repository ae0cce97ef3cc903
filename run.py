"""Entry point for serving the WiseWords API.

Launches the FastAPI application under Uvicorn.  Intended to be
executed from the project root, e.g. in Docker where only a single
Python file is specified.  Host and port are read from ``API_HOST``
and ``API_PORT``; everything else is configured through the
environment variables listed in ``wisewords_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from wisewords_api.app.core.config import settings
from wisewords_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("API stopped")
