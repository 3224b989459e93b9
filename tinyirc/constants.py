"""
Protocol and runtime constants for the tinyirc client

Integer knobs can be overridden by setting an environment variable with the
same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


# Wire format
CRLF = b"\r\n"
MSG_MAX = 512  # bytes per line on the wire, terminator included
LINE_MAX = MSG_MAX - 1  # content bytes per line

# Socket reads
READ_CHUNK_SIZE = _get_env_int("IRC_READ_CHUNK_SIZE", 4096)

# Connection defaults (overridable via config environment variables)
DEFAULT_HOST = "irc.iotek.org"
DEFAULT_PORT = 6667
DEFAULT_NICK = "nickname"
DEFAULT_USERNAME = "username"
DEFAULT_REALNAME = "realname"
DEFAULT_CHANNEL = "#bots"

# Process exit codes
EXIT_OK = 0
EXIT_SETUP_FAILURE = 1
EXIT_DISCONNECTED = 2
