"""
Entrypoint for the backend API service.

`bootstrap()` resolves configuration, configures logging and returns the
FastAPI app without binding a socket, so tests and alternative servers
(gunicorn, hypercorn, ...) can obtain it the same way `run()` does.

Usage:
    python -m app.server.main
    PORT=4000 NODE_ENV=production python -m app.server.main
"""

from __future__ import annotations

import asyncio
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.observability.logging import configure_logging, get_logger
from app.server import create_app
from app.server.banner import print_banner
from app.server.config import ServerConfig, load_config

logger = get_logger(__name__)

# How often serve() checks whether uvicorn has bound its sockets
STARTUP_POLL_SECONDS = 0.05


def bootstrap(config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Return a configured backend application instance.

    When `config` is omitted it is loaded from the environment.
    """

    config = config or load_config()
    configure_logging(level=config.log_level, format=config.log_format)
    return create_app(config)


async def serve(application: FastAPI, config: ServerConfig) -> None:
    """
    Serve `application` and print the banner once the port is bound.

    Uvicorn runs the application's lifespan before binding, so the banner
    waits for `Server.started`; a failed bind never prints it.
    """

    server = uvicorn.Server(
        uvicorn.Config(
            application,
            host=config.host,
            port=config.port,
            # Logging is configured by bootstrap(); keep uvicorn from replacing it.
            log_config=None,
        )
    )
    serving = asyncio.ensure_future(server.serve())
    while not server.started and not serving.done():
        await asyncio.sleep(STARTUP_POLL_SECONDS)
    if server.started:
        print_banner(config)
        logger.info("server_started", host=config.host, port=config.port)
    await serving


def run(config: Optional[ServerConfig] = None) -> None:
    """Serve the application on the configured host and port until stopped."""
    config = config or load_config()
    asyncio.run(serve(bootstrap(config), config))


if __name__ == "__main__":
    run()
