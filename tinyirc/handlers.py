"""Reference handlers and the default binding table.

Each handler receives the connection, the full unsplit line and the
per-line context, and does its own parsing of the fields it needs.

Example line from the server and its token positions::

    PING :sEN55Ens
      0      1

    :dcat!de@d.cat PRIVMSG bob :hey man!!!
          0           1     2    3    4
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import DEFAULT_CHANNEL
from .dispatcher import Binding, LineContext, binding_table
from .logs.logger import logger

if TYPE_CHECKING:  # pragma: no cover
    from .transport import Connection


@dataclass(frozen=True)
class PrivMsg:
    nick: str
    target: str
    message: str


def parse_privmsg(line: str) -> PrivMsg:
    """Extract sender nick, target and message text from a PRIVMSG line.

    Missing structural markers yield empty fields instead of errors.
    """
    fields = line.split()
    prefix = fields[0] if fields and fields[0].startswith(":") else ""
    nick = prefix[1:].split("!", 1)[0] if "!" in prefix else ""
    target = fields[2] if len(fields) > 2 else ""
    # Skip the prefix colon, the text starts after the next one.
    _, sep, message = line[1:].partition(":")
    return PrivMsg(nick=nick, target=target, message=message if sep else "")


def ping(connection: Connection, line: str, context: LineContext) -> None:
    fields = line.split()
    reply = f"PONG {fields[1]}" if len(fields) > 1 else "PONG"
    connection.send(reply)
    logger.log_event("irc", "pong", level=logging.DEBUG, reply=reply)


def privmsg(connection: Connection, line: str, context: LineContext) -> None:
    msg = parse_privmsg(line)
    context.state["privmsg"] = msg
    logger.log_event(
        "irc",
        "privmsg",
        user=msg.nick or None,
        nick=msg.nick,
        target=msg.target,
        message=msg.message,
    )


def end_of_motd(connection: Connection, line: str, context: LineContext) -> None:
    # Post-registration setup (e.g. identifying with NickServ) belongs here.
    channel = context.config.channel if context.config else DEFAULT_CHANNEL
    logger.log_event("irc", "motd_end", target=channel)
    connection.send(f"JOIN {channel}")


# Scanned top to bottom for each token; a handler can only rely on state left
# by bindings for earlier tokens of the same line.
DEFAULT_BINDINGS: tuple[Binding, ...] = binding_table(
    (0, "PING", ping),
    (1, "PRIVMSG", privmsg),
    (1, "376", end_of_motd),
)
