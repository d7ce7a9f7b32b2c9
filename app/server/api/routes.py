"""Routes served by the backend API.

All three endpoints are fixed GET routes with no inputs and no failure
modes. Handlers read nothing but the `ServerConfig` the application was
constructed with, so any number of requests can be served concurrently
without coordination.
"""

from fastapi import APIRouter, Depends, Request

from app.server.api.models import (
    DataResponse,
    HealthStatus,
    HelloMessage,
    build_data,
    build_health,
    build_hello,
)
from app.server.config import ServerConfig

router = APIRouter()


def get_config(request: Request) -> ServerConfig:
    """Return the configuration stored on the running application."""
    return request.app.state.config


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    """Health check endpoint.

    Returns:
        `{"status": "ok", "timestamp": <ISO-8601>}`
    """
    return build_health()


@router.get("/api/hello", response_model=HelloMessage)
async def hello(config: ServerConfig = Depends(get_config)) -> HelloMessage:
    """Greeting endpoint consumed by the client view.

    Returns:
        The greeting, the current timestamp and the configured environment
    """
    return build_hello(config.environment)


@router.get("/api/data", response_model=DataResponse)
async def data() -> DataResponse:
    """Return the fixed three-item listing."""
    return build_data()


__all__ = ["router", "get_config"]
