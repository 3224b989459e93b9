"""Error hierarchy and handling helpers."""

from .handling import error_category, log_error  # noqa: F401
from .internal import (  # noqa: F401
    ConfigError,
    ConnectError,
    ConnectionClosed,
    IRCError,
    ProtocolViolation,
    ResolutionError,
    SetupError,
    WriteError,
)

__all__ = [
    "IRCError",
    "SetupError",
    "ResolutionError",
    "ConnectError",
    "WriteError",
    "ConnectionClosed",
    "ProtocolViolation",
    "ConfigError",
    "error_category",
    "log_error",
]
