"""tinyirc: a minimal single-connection IRC client.

A TCP transport feeds a CRLF line reader; each line is split into tokens and
routed to the handlers bound to (position, token) pairs.
"""

from .client import IRCClient  # noqa: F401
from .config import ClientConfig, load_config  # noqa: F401
from .dispatcher import (  # noqa: F401
    Binding,
    BindingTable,
    Dispatcher,
    LineContext,
    binding_table,
    tokenize,
)
from .framing import LineReader  # noqa: F401
from .handlers import DEFAULT_BINDINGS, PrivMsg, parse_privmsg  # noqa: F401
from .transport import Connection, dial  # noqa: F401

__all__ = [
    "IRCClient",
    "ClientConfig",
    "load_config",
    "Binding",
    "BindingTable",
    "Dispatcher",
    "LineContext",
    "binding_table",
    "tokenize",
    "LineReader",
    "DEFAULT_BINDINGS",
    "PrivMsg",
    "parse_privmsg",
    "Connection",
    "dial",
]

__version__ = "0.1.0"
