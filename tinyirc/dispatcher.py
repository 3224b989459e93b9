"""Positional token dispatch of protocol lines to handler bindings."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .logs.logger import logger

if TYPE_CHECKING:  # pragma: no cover
    from .config import ClientConfig
    from .transport import Connection


@dataclass
class LineContext:
    """Per-line scratch space handed to every handler fired for one line.

    Handlers bound to later token positions can read what earlier ones put
    into ``state``; a fresh context is built for each line.
    """

    connection: Connection
    line: str
    tokens: tuple[str, ...]
    config: ClientConfig | None = None
    state: dict[str, Any] = field(default_factory=dict)


Handler = Callable[["Connection", str, LineContext], None]


@dataclass(frozen=True, slots=True)
class Binding:
    position: int
    match: str
    handler: Handler

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("binding position must be non-negative")
        if not self.match or " " in self.match:
            raise ValueError("binding match must be a single non-empty token")

    def matches(self, position: int, token: str) -> bool:
        return self.position == position and self.match == token


BindingTable = tuple[Binding, ...]


def binding_table(*bindings: Binding | tuple[int, str, Handler]) -> BindingTable:
    """Build an immutable table from Binding objects or (position, match, handler) triples."""
    return tuple(b if isinstance(b, Binding) else Binding(*b) for b in bindings)


def tokenize(line: str) -> tuple[str, ...]:
    """Split a line on spaces, dropping the empty words runs of spaces produce.

    This does not know about the ':' trailing parameter; handlers parse that.
    """
    return tuple(token for token in line.split(" ") if token)


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__name__", None) or repr(handler)


class Dispatcher:
    def __init__(
        self, bindings: Iterable[Binding], config: ClientConfig | None = None
    ) -> None:
        self.bindings: BindingTable = tuple(bindings)
        self.config = config

    def dispatch(self, connection: Connection, line: str) -> int:
        """Fire every binding matching a token of ``line``.

        Tokens are visited in order; for each token the table is scanned top
        to bottom. A failing handler is logged and does not stop the others.

        Returns:
            Number of handlers invoked.
        """
        tokens = tokenize(line)
        context = LineContext(
            connection=connection, line=line, tokens=tokens, config=self.config
        )
        logger.log_event("dispatch", "line", level=logging.DEBUG, line=line)
        fired = 0
        for position, token in enumerate(tokens):
            for binding in self.bindings:
                if not binding.matches(position, token):
                    continue
                fired += 1
                try:
                    binding.handler(connection, line, context)
                except Exception as e:  # noqa: BLE001
                    logger.log_event(
                        "dispatch",
                        "handler_error",
                        level=logging.ERROR,
                        handler=_handler_name(binding.handler),
                        position=position,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
        if not fired:
            logger.log_event(
                "dispatch", "unhandled", level=logging.DEBUG, tokens=len(tokens)
            )
        return fired
