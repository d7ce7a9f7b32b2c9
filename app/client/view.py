"""Client view that shows the backend's greeting.

The view holds two independent pieces of state, `message` and `loading`.
Mounting the view and pressing refresh are the two triggers; both run the
same `load()` cycle:

    loading = True -> GET /api/hello -> message = text -> loading = False

Any transport or decoding error collapses into one fixed message; the
error itself only goes to the log. A body without a `message` shows the
waiting placeholder, and a non-string `message` is shown as text.
Overlapping loads are not guarded: whichever response resolves last
decides the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from app.observability.logging import get_logger

logger = get_logger(__name__)

HELLO_PATH = "/api/hello"
ERROR_MESSAGE = "Error connecting to backend"
LOADING_PLACEHOLDER = "Loading..."
EMPTY_PLACEHOLDER = "Waiting for backend response..."
TITLE = "Sample Frontend Application"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: the text to display and whether it succeeded."""

    message: str
    ok: bool

    @classmethod
    def success(cls, message: str) -> "FetchResult":
        return cls(message=message, ok=True)

    @classmethod
    def failure(cls) -> "FetchResult":
        return cls(message=ERROR_MESSAGE, ok=False)


def _extract_message(payload: Any) -> str:
    # A null body is the only decoded value that cannot be read at all
    if payload is None:
        raise ValueError("response body is null")
    message = payload.get("message") if isinstance(payload, dict) else None
    if message is None:
        return ""
    return message if isinstance(message, str) else str(message)


async def fetch_message(
    client: httpx.AsyncClient, path: str = HELLO_PATH
) -> FetchResult:
    """
    Issue one GET to `path` and return the greeting it carries.

    The response status is not inspected; a body that parses and carries a
    `message` is shown whatever the status. Transport errors, undecodable
    bodies and a `null` body are failures.
    """

    try:
        response = await client.get(path)
        return FetchResult.success(_extract_message(response.json()))
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("fetch_failed", path=path, error=str(exc), exc_info=True)
        return FetchResult.failure()


class MessageView:
    """State and rendering for the single-page client view.

    `on_change` is called with the view after every state transition so a
    front end can redraw; it plays the part of a re-render.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        path: str = HELLO_PATH,
        on_change: Optional[Callable[["MessageView"], None]] = None,
    ) -> None:
        self.client = client
        self.path = path
        self.on_change = on_change
        self.message = ""
        self.loading = False

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    async def mount(self) -> FetchResult:
        """Initial display trigger."""
        return await self.load()

    async def refresh(self) -> FetchResult:
        """User-triggered refresh."""
        return await self.load()

    async def load(self) -> FetchResult:
        self.loading = True
        self._changed()
        try:
            result = await fetch_message(self.client, self.path)
            self.message = result.message
            return result
        finally:
            self.loading = False
            self._changed()

    @property
    def body(self) -> str:
        """Text shown in the content area right now."""
        if self.loading:
            return LOADING_PLACEHOLDER
        return self.message or EMPTY_PLACEHOLDER

    def render(self) -> str:
        """Render the view as a small text frame."""
        width = max(len(TITLE), len(self.body), len("[Refresh]")) + 4
        rule = "+" + "-" * (width - 2) + "+"
        rows = [TITLE, "", self.body, "", "[Refresh]"]
        lines = [rule]
        lines.extend(f"| {row.ljust(width - 4)} |" for row in rows)
        lines.append(rule)
        return "\n".join(lines)


__all__ = [
    "EMPTY_PLACEHOLDER",
    "ERROR_MESSAGE",
    "HELLO_PATH",
    "LOADING_PLACEHOLDER",
    "FetchResult",
    "MessageView",
    "fetch_message",
]
