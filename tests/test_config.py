"""
Tests for config loading.
"""

import json

import pytest

from conftest import TMDB_BASE, TRAKT_BASE, WEBHOOK, config_dict
from episode_notifier.config import (
    DEFAULT_CALENDAR_DAYS,
    DEFAULT_EMBED_COLOR,
    Config,
    default_path,
)
from episode_notifier.errors import ConfigError


def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_dict()), encoding="utf-8")

    config = Config.from_file(str(path))

    assert config.timezone == "America/New_York"
    assert config.discord.webhook == WEBHOOK
    assert config.tmdb.base_url == TMDB_BASE
    assert config.tmdb.api_key == "tmdb-key"
    assert config.trakt.base_url == TRAKT_BASE
    assert config.trakt.client_secret == "client-secret"


def test_defaults(config):
    assert config.calendar_days == DEFAULT_CALENDAR_DAYS == 2
    assert config.discord.color == DEFAULT_EMBED_COLOR == 9838011
    assert config.discord.report_failures is True
    assert config.trakt.api_version == "2"
    assert config.request_timeout > 0


def test_overrides():
    data = config_dict(calendar_days=5, request_timeout=3.5, log_level="debug")
    data["discord"] = {"webhook": WEBHOOK, "color": 123, "report_failures": False}

    config = Config.from_dict(data)

    assert config.calendar_days == 5
    assert config.request_timeout == 3.5
    assert config.log_level == "debug"
    assert config.discord.color == 123
    assert config.discord.report_failures is False


def test_trailing_slash_is_stripped():
    data = config_dict()
    data["trakt"] = dict(data["trakt"], base_url=TRAKT_BASE + "/")

    assert Config.from_dict(data).trakt.base_url == TRAKT_BASE


def test_config_is_immutable(config):
    with pytest.raises(Exception):
        config.timezone = "UTC"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda data: data.pop("timezone"),
        lambda data: data.pop("discord"),
        lambda data: data["tmdb"].pop("api_key"),
        lambda data: data["trakt"].update(client_id=""),
        lambda data: data.update(calendar_days=0),
        lambda data: data.update(request_timeout="fast"),
        lambda data: data["discord"].update(color="purple"),
    ],
)
def test_invalid_config(mutate):
    data = config_dict()
    mutate(data)

    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_from_file_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigError):
        Config.from_file(str(path))


def test_default_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("NOTIFIER_CONFIG_FILE", "/etc/notifier.json")
    assert default_path("NOTIFIER_CONFIG_FILE", "config.json", str(tmp_path)) == "/etc/notifier.json"

    monkeypatch.delenv("NOTIFIER_CONFIG_FILE")
    assert default_path("NOTIFIER_CONFIG_FILE", "config.json", str(tmp_path)) == str(
        tmp_path / "config.json"
    )
