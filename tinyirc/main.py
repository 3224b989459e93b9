"""Process entry point for the IRC client."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .client import IRCClient
from .config import load_config
from .constants import EXIT_DISCONNECTED, EXIT_OK, EXIT_SETUP_FAILURE
from .errors import ConfigError, ConnectionClosed, SetupError, log_error
from .logs.logger import logger


def main(environ: Mapping[str, str] | None = None) -> int:
    """Run the client until the server disconnects.

    Returns:
        Process exit status: 1 when setup fails, 2 when the server closes
        the connection, 0 when interrupted by the user.
    """
    try:
        config = load_config(environ)
    except ConfigError as e:
        log_error("Configuration error", e)
        return EXIT_SETUP_FAILURE

    logger.log_event("app", "start", host=config.host, port=config.port)
    client = IRCClient(config)
    try:
        client.connect()
    except SetupError as e:
        log_error("Connection setup failed", e)
        return EXIT_SETUP_FAILURE

    try:
        client.run()
    except ConnectionClosed as e:
        log_error("Disconnected from server", e, level=logging.CRITICAL)
        return EXIT_DISCONNECTED
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        return EXIT_OK
    finally:
        client.close()
        logger.log_event("app", "shutdown", level=logging.DEBUG)
    return EXIT_OK  # pragma: no cover
