"""Single-connection IRC client: register, then read and dispatch lines."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .config import ClientConfig
from .dispatcher import Binding, Dispatcher
from .errors import ConnectionClosed, WriteError
from .framing import LineReader
from .handlers import DEFAULT_BINDINGS
from .logs.logger import logger
from .transport import Connection, dial


class IRCClient:
    """IRC client bound to one server.

    There is no reconnection logic: when the server closes the connection
    ``run`` raises ConnectionClosed and the caller decides what to do.
    """

    def __init__(
        self,
        config: ClientConfig,
        bindings: Iterable[Binding] = DEFAULT_BINDINGS,
        dialer: Callable[[str, int], Connection] = dial,
    ) -> None:
        self.config = config
        self.dispatcher = Dispatcher(bindings, config)
        self.dialer = dialer
        self.connection: Connection | None = None
        self.reader: LineReader | None = None
        self.lines_processed = 0

    def connect(self) -> Connection:
        """Open the connection and register the session.

        Raises:
            ResolutionError: If the host cannot be resolved.
            ConnectError: If the TCP connection cannot be opened.
        """
        self.connection = self.dialer(self.config.host, self.config.port)
        self.reader = LineReader(self.connection)
        self.lines_processed = 0
        logger.log_event(
            "irc", "registering", level=logging.DEBUG, nick=self.config.nick
        )
        # The server will not reply until NICK has been sent.
        self.send(f"NICK {self.config.nick}")
        self.send(f"USER {self.config.username} * * :{self.config.realname}")
        return self.connection

    def send(self, message: str) -> bool:
        """Best-effort send; failures are logged, never raised."""
        if self.connection is None:
            logger.log_event(
                "irc",
                "send_failed",
                level=logging.WARNING,
                command=message.split(" ", 1)[0],
                error="not connected",
            )
            return False
        try:
            self.connection.send(message)
        except WriteError as e:
            logger.log_event(
                "irc",
                "send_failed",
                level=logging.WARNING,
                command=message.split(" ", 1)[0],
                error=str(e),
            )
            return False
        return True

    def run(self) -> None:
        """Read and dispatch lines until the server closes the connection.

        Raises:
            ConnectionClosed: Always, once the connection is gone.
        """
        if self.connection is None or self.reader is None:
            raise ConnectionClosed("client is not connected")
        logger.log_event("irc", "loop_started", level=logging.DEBUG)
        try:
            for line in self.reader.lines():
                self.dispatcher.dispatch(self.connection, line)
                self.lines_processed += 1
        except ConnectionClosed:
            logger.log_event(
                "irc",
                "disconnected",
                level=logging.ERROR,
                lines=self.lines_processed,
            )
            raise
        finally:
            self.close()

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
