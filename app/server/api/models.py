"""
Response models for the API routes.

Every value here is built fresh for a single response and discarded once
serialized. `DATA_ITEMS` is an immutable tuple so the data route cannot
drift between calls.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

HELLO_MESSAGE = "Hello from the backend API!"


class HealthStatus(BaseModel):
    """Body of `GET /health`."""

    status: Literal["ok"] = "ok"
    timestamp: str = Field(..., description="ISO-8601 time the response was built")


class HelloMessage(BaseModel):
    """Body of `GET /api/hello`."""

    message: str
    timestamp: str
    environment: str


class DataItem(BaseModel):
    """One entry of the fixed data listing."""

    id: int
    name: str
    value: int

    model_config = ConfigDict(frozen=True)


class DataResponse(BaseModel):
    """Body of `GET /api/data`."""

    data: List[DataItem]


DATA_ITEMS: tuple[DataItem, ...] = (
    DataItem(id=1, name="Item 1", value=100),
    DataItem(id=2, name="Item 2", value=200),
    DataItem(id=3, name="Item 3", value=300),
)


def now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def build_health() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=now_iso())


def build_hello(environment: str) -> HelloMessage:
    return HelloMessage(
        message=HELLO_MESSAGE,
        timestamp=now_iso(),
        environment=environment,
    )


def build_data() -> DataResponse:
    return DataResponse(data=list(DATA_ITEMS))


__all__ = [
    "DATA_ITEMS",
    "HELLO_MESSAGE",
    "DataItem",
    "DataResponse",
    "HealthStatus",
    "HelloMessage",
    "build_data",
    "build_health",
    "build_hello",
    "now_iso",
]
