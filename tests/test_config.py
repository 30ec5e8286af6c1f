from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from core.config import ClientSettings, get_user_config_dir, write_user_env_vars


def test_defaults() -> None:
    settings = ClientSettings(_env_file=None)

    assert settings.base_url == "http://localhost:9200"
    assert settings.verify_tls is True
    assert settings.username is None


def test_env_vars_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ES_MGET_HOST", "https://search.example:9243/")
    monkeypatch.setenv("ES_MGET_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("ES_MGET_VERIFY_TLS", "false")

    settings = ClientSettings(_env_file=None)

    assert settings.base_url == "https://search.example:9243"
    assert settings.http_timeout_seconds == 5.0
    assert settings.verify_tls is False


def test_project_env_file_is_read(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("ES_MGET_USERNAME=elastic\n", encoding="utf-8")

    settings = ClientSettings(_env_file=env_file)

    assert settings.username == "elastic"


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(_env_file=None, http_timeout_seconds=0)


def test_write_user_env_vars_merges(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert get_user_config_dir() == tmp_path / "xdg" / "es-mget"

    write_user_env_vars({"ES_MGET_HOST": "http://a:9200", "ES_MGET_USERNAME": "elastic"})
    path = write_user_env_vars({"ES_MGET_HOST": "http://b:9200", "ES_MGET_PASSWORD": None})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["ES_MGET_HOST=http://b:9200", "ES_MGET_USERNAME=elastic"]


def test_user_env_file_comes_from_isolated_config_dir(tmp_path) -> None:
    env_file = get_user_config_dir() / ".env"
    env_file.parent.mkdir(parents=True)
    env_file.write_text("ES_MGET_HOST=http://saved:9200\n", encoding="utf-8")

    assert env_file.is_relative_to(tmp_path)
    assert ClientSettings().host == "http://saved:9200"
