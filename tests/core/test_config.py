"""
Tests for configuration loading.
"""

import json

import pytest

from video_transformer.core.config import Config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("STATIC_API_TOKEN", raising=False)
    monkeypatch.delenv("BASE_URL", raising=False)


def test_defaults_are_written_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_file = tmp_path / "config.json"

    config = Config(str(config_file))

    assert config.upload.max_size == "20mb"
    assert config.upload.min_duration_seconds == 5
    assert config.upload.max_duration_seconds == 60
    assert config.sharing.default_expiry_seconds == 86400
    assert config.auth.api_token is None
    assert json.loads(config_file.read_text())["sharing"]["default_expiry_seconds"] == 86400
    assert (tmp_path / "storage" / "uploads").is_dir()


def test_sections_load_from_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "storage": {"base_path": str(tmp_path / "data"), "uploads_dir": "files"},
        "upload": {"max_size": "5mb", "min_duration_seconds": 1, "max_duration_seconds": 10},
        "media": {"timeout_seconds": 30, "merge_include_audio": False},
    }))

    config = Config(str(config_file))

    assert config.upload.max_size == "5mb"
    assert config.media.timeout_seconds == 30
    assert config.media.merge_include_audio is False
    assert config.storage.uploads_path == tmp_path / "data" / "files"
    assert config.storage.index_path == tmp_path / "data" / "catalog_index.json"
    assert config.storage.uploads_path.is_dir()


def test_environment_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "storage": {"base_path": str(tmp_path / "storage")},
        "auth": {"api_token": "from-file"},
        "sharing": {"base_url": "http://file.example"},
    }))
    monkeypatch.setenv("STATIC_API_TOKEN", "from-env")
    monkeypatch.setenv("BASE_URL", "https://videos.example")

    config = Config(str(config_file))

    assert config.auth.api_token == "from-env"
    assert config.sharing.base_url == "https://videos.example"


def test_saved_config_omits_token(tmp_path):
    config_file = tmp_path / "config.json"
    config = Config(str(config_file), save_defaults=False)
    config.storage.base_path = str(tmp_path / "storage")
    config.auth.api_token = "secret"

    config.save_config()

    saved = json.loads(config_file.read_text())
    assert saved["auth"]["api_token"] is None
    assert config.auth.api_token == "secret"
    assert set(saved) == {"storage", "upload", "media", "sharing", "auth", "system"}
