"""Error categorisation and logging helpers."""

from __future__ import annotations

import logging

from ..logs.logger import logger
from .internal import (
    ConfigError,
    ConnectionClosed,
    IRCError,
    ProtocolViolation,
    SetupError,
    WriteError,
)


def error_category(error: BaseException) -> str:
    """Map an exception to a coarse category used in log events."""
    if isinstance(error, SetupError):
        return "setup"
    if isinstance(error, WriteError | ConnectionClosed | OSError):
        return "network"
    if isinstance(error, ProtocolViolation):
        return "protocol"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, IRCError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: BaseException,
    context: dict[str, object] | None = None,
    *,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level, ERROR unless the caller knows better.
    """
    details: dict[str, object] = {}
    if isinstance(error, IRCError):
        details.update(error.data)
    if context:
        details.update(context)
    logger.log_event(
        "error",
        error_category(error),
        level=level,
        human=f"{message}: {error}",
        error_type=type(error).__name__,
        **details,
    )


__all__ = ["error_category", "log_error"]
