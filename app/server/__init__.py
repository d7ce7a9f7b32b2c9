"""
Server package for the backend API.

* `config.py` - `ServerConfig` and environment loading.
* `api/` - FastAPI router and response models.
* `banner.py` - Startup banner, printed by `main.run()` once the port is bound.
* `main.py` - `bootstrap()` and the uvicorn entrypoint.

`create_app` is the only place a FastAPI instance is built; it receives its
configuration explicitly so nothing in request handling depends on
process-wide state.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.observability.logging import (
    clear_correlation_id,
    get_logger,
    set_correlation_id,
)
from app.server.api import router
from app.server.config import ServerConfig

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass(frozen=True)
class RouteDefinition:
    """
    Metadata for a public route.

    The FastAPI router owns dispatch; this registry only describes the
    public surface. Tests keep it in step with the mounted router.
    """

    path: str
    method: str = "GET"
    description: str = ""

    @property
    def key(self) -> str:
        return f"{self.method.upper()} {self.path}"


ROUTES: tuple[RouteDefinition, ...] = (
    RouteDefinition("/health", description="Health check"),
    RouteDefinition("/api/hello", description="Greeting consumed by the client view"),
    RouteDefinition("/api/data", description="Fixed three-item listing"),
)


def available_routes() -> Dict[str, RouteDefinition]:
    """Return the public routes keyed by `"METHOD /path"`."""
    return {route.key: route for route in ROUTES}


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Build the backend application for `config`.

    Each call returns an independent app; the configuration is stored on
    `app.state.config` and read by handlers through a dependency.
    """

    config = config or ServerConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "application_startup",
            host=config.host,
            port=config.port,
            environment=config.environment,
        )
        yield
        logger.info("application_shutdown")

    app = FastAPI(
        title="Sample Backend API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    # Any origin may call the API; there is no allow-list.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def correlate_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(REQUEST_ID_HEADER))
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = correlation_id
            logger.debug(
                "request_handled",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            return response
        finally:
            clear_correlation_id()

    app.include_router(router)
    return app


__all__ = [
    "REQUEST_ID_HEADER",
    "ROUTES",
    "RouteDefinition",
    "available_routes",
    "create_app",
]
