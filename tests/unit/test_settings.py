"""Tests for settings composition and env-file selection."""

from pathlib import Path

import pytest

from app.core.settings import settings
from app.core.settings.paths import PathSettings


@pytest.mark.parametrize(
    ("environment", "expected"),
    [
        ("test", (Path(".env.test"), "test")),
        ("Development", (Path(".env.dev"), "development")),
        ("staging", (Path(".env"), "production")),
    ],
)
def test_environment_selects_env_file(monkeypatch, environment, expected):
    monkeypatch.setenv("ENVIRONMENT", environment)
    monkeypatch.setenv("ENV_FILE", "/tmp/ignored.env")

    assert PathSettings.get_env_file_and_type() == expected


def test_explicit_env_file(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("ENV_FILE", "/srv/channel-url/.env.custom")

    assert PathSettings.get_env_file_and_type() == (Path("/srv/channel-url/.env.custom"), "custom")


def test_default_env_file(monkeypatch, tmp_path):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("ENV_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    assert PathSettings.get_env_file_and_type() == (Path(".env"), "production")

    (tmp_path / ".env.dev").write_text("")
    assert PathSettings.get_env_file_and_type() == (Path(".env.dev"), "development")


def test_composite_settings_groups():
    assert settings.channel_url.MAX_CHANNELNAME_LENGTH == 64
    assert not hasattr(settings, "paths")
