"""
Configuration for the console client.

Precedence: explicit overrides, then the `API_URL` environment variable
(a `.env` file is honoured), then the default local backend address.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.server.config import DEFAULT_PORT, ConfigError

DEFAULT_API_URL = f"http://localhost:{DEFAULT_PORT}"


class ClientConfig(BaseModel):
    """Where the client view sends its requests."""

    api_url: str = Field(DEFAULT_API_URL, description="Backend base URL", min_length=1)
    timeout: Optional[float] = Field(
        None, description="Request timeout in seconds; None waits indefinitely", gt=0
    )

    model_config = ConfigDict(frozen=True)


def load_client_config(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> ClientConfig:
    """Resolve the client configuration, raising `ConfigError` on bad values."""
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values: dict[str, Any] = {}
    if environ.get("API_URL"):
        values["api_url"] = environ["API_URL"]
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ClientConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc


__all__ = ["ClientConfig", "DEFAULT_API_URL", "load_client_config"]
