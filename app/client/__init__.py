"""
Client view for the backend API.

`MessageView` fetches `/api/hello` on mount and on every refresh and
renders the greeting, a loading placeholder, or a fixed error message.
`python -m app.client` runs it as a console front end.
"""

from app.client.config import ClientConfig, load_client_config
from app.client.view import (
    ERROR_MESSAGE,
    LOADING_PLACEHOLDER,
    FetchResult,
    MessageView,
    fetch_message,
)

__all__ = [
    "ClientConfig",
    "ERROR_MESSAGE",
    "FetchResult",
    "LOADING_PLACEHOLDER",
    "MessageView",
    "fetch_message",
    "load_client_config",
]
