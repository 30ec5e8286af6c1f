"""Shared test fixtures."""

from __future__ import annotations

import sys
from typing import Any

import httpx
import pytest

from adapters.http_transport import HttpTransport
from core.config import ClientSettings, get_user_env_file
from core.domain.models import RequestDescriptor


class RecordingTransport:
    """Transport double that records every descriptor it receives."""

    def __init__(self, result: Any = None) -> None:
        self.calls: list[tuple[RequestDescriptor, Any]] = []
        self.result = result
        self.closed = False

    def request(self, descriptor: RequestDescriptor, callback: Any = None) -> Any:
        self.calls.append((descriptor, callback))
        return self.result

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport(result={"docs": []})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer env vars and .env files out of the tests."""

    for name in ("HOST", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "USERNAME", "PASSWORD", "VERIFY_TLS", "LOG_LEVEL"):
        monkeypatch.delenv(f"ES_MGET_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    # env_file was resolved against the real user config dir at import time.
    monkeypatch.setitem(ClientSettings.model_config, "env_file", (".env", str(get_user_env_file())))


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None, host="http://es.test:9200")


@pytest.fixture
def make_transport(settings: ClientSettings):
    """Build an `HttpTransport` whose httpx client is served by `handler`."""

    def factory(handler) -> HttpTransport:
        client = httpx.Client(base_url=settings.base_url, transport=httpx.MockTransport(handler))
        return HttpTransport(settings, client=client)

    return factory
