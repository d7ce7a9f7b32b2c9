"""
Global pytest configuration for the sample backend and client.

This file provides shared fixtures and enforces Python version requirements.
"""

from __future__ import annotations

import sys
from typing import AsyncIterator, Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from app.observability.logging import clear_correlation_id, configure_logging
from app.server import create_app
from app.server.config import ServerConfig

_MIN_PY_VERSION = (3, 11)


def _verify_python_version() -> str:
    """Return the interpreter version string or exit if <3.11."""
    version_info = sys.version_info
    version_str = ".".join(map(str, version_info[:3]))
    if version_info < _MIN_PY_VERSION:
        pytest.exit(
            f"ERROR: pytest must run on Python 3.11+ (detected {version_str}).",
            returncode=1,
        )
    return version_str


def pytest_report_header(config: pytest.Config) -> str:
    version_str = _verify_python_version()
    return f"Python interpreter verified for pytest: {version_str}"


def pytest_configure(config: pytest.Config) -> None:
    """Register project markers to prevent unknown marker warnings."""
    markers = {
        "unit": "Unit tests that should execute quickly.",
        "integration": "Integration tests hitting multiple components.",
    }
    for name, description in markers.items():
        config.addinivalue_line("markers", f"{name}: {description}")


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Leave logging and correlation state as each test found it."""
    yield
    clear_correlation_id()
    configure_logging(level="INFO", format="console")


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(port=4000, environment="test")


@pytest.fixture
def app(server_config: ServerConfig) -> FastAPI:
    return create_app(server_config)


@pytest_asyncio.fixture
async def api_client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client wired straight into the ASGI app, no socket involved."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client
