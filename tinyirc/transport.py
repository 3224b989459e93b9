"""TCP transport: name resolution, connect and line-oriented writes."""

from __future__ import annotations

import logging
import socket

from .constants import CRLF, MSG_MAX
from .errors import ConnectError, ResolutionError, WriteError
from .logs.logger import logger


def _encode_line(message: str) -> tuple[bytes, bool]:
    """Encode one outbound line, returning (wire bytes, truncated flag).

    CR and LF are removed so a single send can never emit more than one
    protocol line. The payload is cut to fit MSG_MAX with its terminator,
    without splitting a multi-byte character.
    """
    clean = message.replace("\r", "").replace("\n", "")
    payload = clean.encode("utf-8")
    limit = MSG_MAX - len(CRLF)
    truncated = len(payload) > limit
    if truncated:
        payload = payload[:limit].decode("utf-8", errors="ignore").encode("utf-8")
    return payload + CRLF, truncated


class Connection:
    """An open TCP connection to a single IRC server."""

    def __init__(self, sock: socket.socket, host: str, port: int) -> None:
        self.sock = sock
        self.host = host
        self.port = port
        self.closed = False

    def send(self, message: str) -> None:
        """Write one CRLF-terminated line immediately.

        Raises:
            WriteError: If the connection is closed or the write fails.
        """
        data, truncated = _encode_line(message)
        if truncated:
            logger.log_event(
                "transport", "truncated", level=logging.WARNING, limit=MSG_MAX
            )
        if self.closed:
            raise WriteError("connection is closed", data={"host": self.host})
        try:
            self.sock.sendall(data)
        except OSError as e:
            raise WriteError(f"write failed: {e}", data={"host": self.host}) from e
        logger.log_event(
            "transport",
            "send",
            level=logging.DEBUG,
            line=data[: -len(CRLF)].decode("utf-8", errors="replace"),
        )

    def recv(self, size: int) -> bytes:
        """Perform one blocking read; empty bytes means the peer closed."""
        if self.closed:
            return b""
        return self.sock.recv(size)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self.sock.close()
        except OSError:
            pass
        logger.log_event("transport", "closed", level=logging.DEBUG, host=self.host)

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def dial(host: str, port: int) -> Connection:
    """Resolve host and open a TCP connection to it.

    Raises:
        ResolutionError: If the host name cannot be resolved.
        ConnectError: If the socket cannot be created or connect fails.
    """
    logger.log_event("transport", "resolving", level=logging.DEBUG, host=host)
    try:
        address = socket.gethostbyname(host)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(
            f"cannot resolve {host}: {e}", data={"host": host}
        ) from e

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as e:
        raise ConnectError(
            f"cannot create socket: {e}", data={"host": host, "port": port}
        ) from e

    try:
        sock.connect((address, port))
    except OSError as e:
        sock.close()
        raise ConnectError(
            f"cannot connect to {host}:{port}: {e}",
            data={"host": host, "port": port, "address": address},
        ) from e

    logger.log_event(
        "transport", "connected", host=host, port=port, address=address
    )
    return Connection(sock, host, port)
