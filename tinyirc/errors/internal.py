"""Centralized error hierarchy for the IRC client.

These exceptions give callers distinguishable failure categories so the
entry point can decide what is fatal. Raw socket errors never escape the
transport or framing layers; they are wrapped in one of these instead.

Classes:
  IRCError             – Base for all client errors.
  SetupError           – Failures before a session exists (not retried).
  ResolutionError      – Host name lookup failed.
  ConnectError         – Socket creation or TCP handshake failed.
  WriteError           – A send to the server failed (best effort).
  ConnectionClosed     – The server closed the connection (fatal).
  ProtocolViolation    – Inbound data broke the framing rules.
  ConfigError          – Configuration values failed validation.
"""

from __future__ import annotations

from collections.abc import Mapping


class IRCError(Exception):
    """Base class for all client errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class SetupError(IRCError):
    """Raised when a session cannot be established.

    The top-level caller aborts startup with a non-zero exit code.
    """


class ResolutionError(SetupError):
    """Raised when the server host name cannot be resolved."""


class ConnectError(SetupError):
    """Raised when the socket cannot be created or the connect handshake fails."""


class WriteError(IRCError):
    """Raised when writing a line to the server fails.

    Callers decide whether this is fatal; the client treats it as best effort.
    """


class ConnectionClosed(IRCError):
    """Raised when the server closes the connection.

    There is no reconnection logic, so this ends the read loop.
    """


class ProtocolViolation(IRCError):
    """Raised when inbound data breaks framing rules (e.g. an overlong line)."""


class ConfigError(IRCError):
    """Raised when configuration values fail validation."""


__all__ = [
    "IRCError",
    "SetupError",
    "ResolutionError",
    "ConnectError",
    "WriteError",
    "ConnectionClosed",
    "ProtocolViolation",
    "ConfigError",
]
