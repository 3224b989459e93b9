from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    DEFAULT_CHANNEL,
    DEFAULT_HOST,
    DEFAULT_NICK,
    DEFAULT_PORT,
    DEFAULT_REALNAME,
    DEFAULT_USERNAME,
)

_FORBIDDEN = (" ", "\r", "\n", "\x00")


class ClientConfig(BaseModel):
    """Connection and session settings for one IRC client.

    Attributes:
        host: Server host name or address.
        port: Server TCP port.
        nick: Nickname sent with NICK.
        username: User name sent with USER.
        realname: Real name sent with USER.
        channel: Channel joined once the MOTD ends.
    """

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    nick: str = DEFAULT_NICK
    username: str = DEFAULT_USERNAME
    realname: str = DEFAULT_REALNAME
    channel: str = DEFAULT_CHANNEL

    @field_validator("host", "nick", "username", "channel", mode="before")
    @classmethod
    def validate_word(cls, v: Any) -> str:
        """Strip whitespace and reject empty values or embedded separators."""
        if not isinstance(v, str):
            raise ValueError("must be a string")
        stripped = v.strip()
        if not stripped:
            raise ValueError("must not be empty")
        if any(ch in stripped for ch in _FORBIDDEN):
            raise ValueError("must be a single word without control characters")
        return stripped

    @field_validator("realname", mode="before")
    @classmethod
    def validate_realname(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("must be a string")
        stripped = v.strip()
        if not stripped:
            raise ValueError("must not be empty")
        if any(ch in stripped for ch in _FORBIDDEN[1:]):
            raise ValueError("must not contain control characters")
        return stripped

    @field_validator("channel")
    @classmethod
    def normalize_channel(cls, v: str) -> str:
        """Ensure the channel name carries its '#' prefix."""
        return v if v.startswith(("#", "&")) else f"#{v}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientConfig:
        """Create ClientConfig from a dictionary, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls(**known)
