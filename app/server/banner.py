"""Startup banner printed once the service is listening."""

from __future__ import annotations

from typing import List

from app.server.config import ServerConfig


def banner_lines(config: ServerConfig) -> List[str]:
    """Return the three human-readable startup lines for `config`."""
    base = f"http://localhost:{config.port}"
    return [
        f"Backend server is running on port {config.port}",
        f"Health check: {base}/health",
        f"API endpoint: {base}/api/hello",
    ]


def print_banner(config: ServerConfig) -> None:
    for line in banner_lines(config):
        print(line, flush=True)


__all__ = ["banner_lines", "print_banner"]
