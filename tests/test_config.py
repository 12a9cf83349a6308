"""Tests for YAML + env configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from yt_archiver.config import DEFAULT_USER_AGENT, AppConfig, FetchConfig, load_config


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "nope.yaml")
    assert isinstance(config, AppConfig)
    assert config.fetch.reply_batch_size == 5
    assert config.fetch.fetch_replies is True
    assert config.http.user_agent == DEFAULT_USER_AGENT
    assert config.innertube.client_name == "WEB"
    assert config.innertube.hl == "en"
    assert config.innertube.gl == "US"


def test_yaml_values_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "http:\n  timeout: 10\n  user_agent: TestUA/1.0\n"
        "fetch:\n  reply_batch_size: 3\n  fetch_replies: false\n"
        "logging:\n  level: DEBUG\n"
    )
    config = load_config(path)
    assert config.http.timeout == 10
    assert config.http.user_agent == "TestUA/1.0"
    assert config.fetch.reply_batch_size == 3
    assert config.fetch.fetch_replies is False
    assert config.logging.level == "DEBUG"


def test_env_placeholders_substituted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARCHIVER_UA", "FromEnv/2.0")
    path = tmp_path / "config.yaml"
    path.write_text("http:\n  user_agent: ${ARCHIVER_UA}\n")
    assert load_config(path).http.user_agent == "FromEnv/2.0"


def test_env_prefix_overrides_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FETCH_REPLY_BATCH_SIZE", "2")
    assert load_config(tmp_path / "missing.yaml").fetch.reply_batch_size == 2


def test_empty_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).fetch.reply_batch_size == 5


def test_batch_size_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        FetchConfig(reply_batch_size=0)
