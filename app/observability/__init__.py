"""Logging helpers shared by the server and the client view.

Usage:
    from app.observability import get_logger, configure_logging

    configure_logging(level="INFO", format="console")
    logger = get_logger(__name__)
    logger.info("server_started", port=3000)
"""

from app.observability.logging import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
