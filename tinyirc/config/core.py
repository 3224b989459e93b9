"""Configuration loading from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors import ConfigError
from .model import ClientConfig

ENV_PREFIX = "IRC_"
_FIELDS = ("host", "port", "nick", "username", "realname", "channel")


def config_from_environ(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect the IRC_* variables that map onto ClientConfig fields."""
    values: dict[str, str] = {}
    for field in _FIELDS:
        raw = environ.get(f"{ENV_PREFIX}{field.upper()}")
        if raw is not None:
            values[field] = raw
    return values


def load_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Build the client configuration.

    Args:
        environ: Mapping to read IRC_* variables from, ``os.environ`` by default.

    Returns:
        Validated ClientConfig; fields without a variable keep their defaults.

    Raises:
        ConfigError: If any supplied value fails validation.
    """
    values = config_from_environ(os.environ if environ is None else environ)
    try:
        return ClientConfig.from_dict(values)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigError(
            f"invalid configuration for {', '.join(fields) or 'client'}",
            data={"fields": fields},
        ) from e
