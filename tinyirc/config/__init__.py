"""Configuration package exports."""

from .core import config_from_environ, load_config  # noqa: F401
from .model import ClientConfig

__all__ = ["ClientConfig", "config_from_environ", "load_config"]
