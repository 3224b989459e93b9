"""CRLF line framing over a blocking byte stream."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol

from .constants import CRLF, LINE_MAX, READ_CHUNK_SIZE
from .errors import ConnectionClosed, ProtocolViolation
from .logs.logger import logger


class ByteSource(Protocol):
    def recv(self, size: int) -> bytes: ...


class LineReader:
    """Turns a byte stream into protocol lines.

    Lines are split on the exact sequence CR LF; a lone CR or LF is content.
    Content longer than ``max_line`` bytes is a protocol violation: the reader
    raises ProtocolViolation and skips to the end of that line, so the next
    ``read_line`` call starts on a clean boundary.
    """

    def __init__(
        self,
        source: ByteSource,
        *,
        chunk_size: int = READ_CHUNK_SIZE,
        max_line: int = LINE_MAX,
    ) -> None:
        self.source = source
        self.chunk_size = chunk_size
        self.max_line = max_line
        self._buffer = bytearray()
        self._discarding = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read_line(self) -> str:
        """Block until one complete line is available and return it decoded.

        Raises:
            ConnectionClosed: The peer closed the connection.
            ProtocolViolation: A line exceeded ``max_line`` bytes.
        """
        while True:
            line = self._take_line()
            if line is not None:
                return line.decode("utf-8", errors="replace")
            self._fill()

    def lines(self) -> Iterator[str]:
        """Yield lines until the connection closes, skipping oversized ones.

        The iterator ends by raising ConnectionClosed.
        """
        while True:
            try:
                yield self.read_line()
            except ProtocolViolation:
                continue

    def _take_line(self) -> bytes | None:
        while True:
            end = self._buffer.find(CRLF)
            if self._discarding:
                if end == -1:
                    # Keep a trailing CR in case its LF arrives in the next chunk.
                    keep = 1 if self._buffer.endswith(b"\r") else 0
                    del self._buffer[: len(self._buffer) - keep]
                    return None
                del self._buffer[: end + len(CRLF)]
                self._discarding = False
                continue
            if end == -1:
                # A trailing CR may still turn out to be a terminator.
                pending = len(self._buffer)
                if self._buffer.endswith(b"\r"):
                    pending -= 1
                if pending > self.max_line:
                    self._overflow()
                return None
            if end > self.max_line:
                del self._buffer[: end + len(CRLF)]
                self._violation(end)
            line = bytes(self._buffer[:end])
            del self._buffer[: end + len(CRLF)]
            return line

    def _overflow(self) -> None:
        size = len(self._buffer)
        # Keep a trailing CR in case its LF arrives in the next chunk.
        keep = 1 if self._buffer.endswith(b"\r") else 0
        del self._buffer[: size - keep]
        self._discarding = True
        self._violation(size)

    def _violation(self, size: int) -> None:
        logger.log_event(
            "framing",
            "line_too_long",
            level=logging.WARNING,
            limit=self.max_line,
            size=size,
        )
        raise ProtocolViolation(
            f"line exceeds {self.max_line} bytes",
            data={"limit": self.max_line, "size": size},
        )

    def _fill(self) -> None:
        if self._closed:
            raise ConnectionClosed("connection already closed")
        while True:
            try:
                chunk = self.source.recv(self.chunk_size)
            except OSError as e:
                logger.log_event(
                    "framing", "read_error", level=logging.WARNING, error=str(e)
                )
                continue
            break
        if not chunk:
            self._closed = True
            if self._buffer and not self._discarding:
                logger.log_event(
                    "framing",
                    "partial_discarded",
                    level=logging.WARNING,
                    size=len(self._buffer),
                )
            self._buffer.clear()
            logger.log_event("framing", "peer_closed", level=logging.WARNING)
            raise ConnectionClosed("server closed the connection")
        self._buffer.extend(chunk)
