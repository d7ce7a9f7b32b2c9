"""
API package for the backend service.

The FastAPI router lives in `routes.py` and its response models in
`models.py`; `create_app` in `app.server` mounts the router.
"""

from __future__ import annotations

from app.server.api.routes import router

API_VERSION = "0.1.0"


def describe() -> str:
    """Return a short string describing the API surface."""
    paths = sorted({route.path for route in router.routes})
    return f"{API_VERSION} ({', '.join(paths)})"


__all__ = ["API_VERSION", "describe", "router"]
