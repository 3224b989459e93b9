from typing import Any

import pytest

from tests.fixtures.connection_fixtures import FakeConnection
from tinyirc.config import ClientConfig
from tinyirc.logs.logger import logger as irc_logger


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        host="irc.test",
        port=6667,
        nick="tester",
        username="tuser",
        realname="Test User",
        channel="#bots",
    )


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def events(monkeypatch) -> list[tuple[str, str, dict[str, Any]]]:
    """Capture (domain, action, kwargs) for every logged event."""
    seen: list[tuple[str, str, dict[str, Any]]] = []
    original_log_event = irc_logger.log_event

    def capture(domain: str, action: str, *args: Any, **kwargs: Any) -> None:
        seen.append((domain, action, kwargs))
        original_log_event(domain, action, *args, **kwargs)

    monkeypatch.setattr(irc_logger, "log_event", capture)
    return seen
