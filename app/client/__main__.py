"""
Console front end for the client view.

Usage:
    python -m app.client
    API_URL=http://localhost:4000 python -m app.client

The view is mounted (first fetch) as soon as it starts. Afterwards an empty
line or `r` refreshes, and `q` or end of input exits.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Awaitable, Callable, Optional

import httpx

from app.client.config import ClientConfig, load_client_config
from app.client.view import MessageView
from app.observability.logging import configure_logging

ReadLine = Callable[[], Awaitable[str]]
Write = Callable[[str], None]

PROMPT = "Press Enter or 'r' to refresh, 'q' to quit."
REFRESH_COMMANDS = ("", "r", "refresh")
QUIT_COMMANDS = ("q", "quit", "exit")


async def _read_stdin() -> str:
    return await asyncio.to_thread(sys.stdin.readline)


def _print(text: str) -> None:
    print(text, flush=True)


async def run_console(
    view: MessageView,
    read_line: ReadLine = _read_stdin,
    write: Write = _print,
) -> int:
    """
    Drive `view` from line-based input until the user quits.

    Returns the number of refreshes performed after the initial mount.
    """

    view.on_change = lambda current: write(current.render())
    await view.mount()

    refreshes = 0
    while True:
        write(PROMPT)
        line = await read_line()
        if line == "":
            # End of input
            break
        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in REFRESH_COMMANDS:
            await view.refresh()
            refreshes += 1
        else:
            write(f"Unknown command: {command!r}")
    return refreshes


async def main(config: Optional[ClientConfig] = None) -> None:
    config = config or load_client_config()
    async with httpx.AsyncClient(
        base_url=config.api_url, timeout=config.timeout
    ) as client:
        await run_console(MessageView(client))


if __name__ == "__main__":
    # Only fetch errors and warnings interleave with the rendered view.
    configure_logging(level="WARNING", format="console")
    asyncio.run(main())
