"""
Tests for JSON file loading/saving and the token store.
"""

import json
from unittest.mock import patch

import pytest

from episode_notifier.errors import ConfigError, ErrorKind, PersistError, TokenError
from episode_notifier.store import TokenStore, load_json, save_json


def test_load_json_missing_file(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_json(str(tmp_path / "missing.json"))
    assert excinfo.value.kind is ErrorKind.CONFIG


def test_load_json_invalid_content(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_json(str(path))


def test_save_json_is_pretty_and_keeps_slashes(tmp_path):
    path = tmp_path / "out.json"
    save_json(str(path), {"url": "https://example.com/a/b", "name": "Café"})

    text = path.read_text(encoding="utf-8")
    assert "https://example.com/a/b" in text
    assert "Café" in text
    assert "\n    " in text
    assert not (tmp_path / "out.json.tmp").exists()


def test_save_json_unserializable(tmp_path):
    path = tmp_path / "out.json"

    with pytest.raises(PersistError) as excinfo:
        save_json(str(path), {"value": object()})

    assert excinfo.value.kind is ErrorKind.PERSIST
    assert not path.exists()


def test_save_json_unwritable_location(tmp_path):
    with pytest.raises(PersistError):
        save_json(str(tmp_path / "no-such-dir" / "out.json"), {"a": 1})


def test_token_round_trip_preserves_fields(token_store, token_path):
    original = json.loads(token_path.read_text(encoding="utf-8"))

    token = token_store.load()
    token["expires_at"] = original["expires_at"] + 100
    token_store.save(token)

    saved = json.loads(token_path.read_text(encoding="utf-8"))
    assert saved["expires_at"] == original["expires_at"] + 100
    for key in original:
        if key != "expires_at":
            assert saved[key] == original[key]


def test_token_store_requires_fields(tmp_path):
    path = tmp_path / "token.json"
    path.write_text(json.dumps({"access_token": "abc"}), encoding="utf-8")

    with pytest.raises(TokenError) as excinfo:
        TokenStore(str(path)).load()
    assert "refresh_token" in str(excinfo.value)


def test_token_store_rejects_non_numeric_expiry(tmp_path):
    path = tmp_path / "token.json"
    path.write_text(
        json.dumps({"access_token": "a", "refresh_token": "r", "expires_at": "tomorrow"}),
        encoding="utf-8",
    )

    with pytest.raises(TokenError):
        TokenStore(str(path)).load()


def test_token_store_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        TokenStore(str(tmp_path / "token.json")).load()


def test_failed_replace_removes_temp_file(tmp_path):
    path = tmp_path / "token.json"

    with patch("episode_notifier.store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistError):
            save_json(str(path), {"a": 1})

    assert not (tmp_path / "token.json.tmp").exists()
    assert not path.exists()
