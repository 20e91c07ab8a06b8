"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from treedrag.config import DEFAULT_GUTTER_SIZE, Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("TREEDRAG_ENV_FILE", "TREEDRAG_GUTTER_SIZE", "TREEDRAG_LOG_LEVEL", "TREEDRAG_EVENTS_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    """It should default to an 8-unit gutter."""

    settings = load_settings()
    assert settings.gutter_size == DEFAULT_GUTTER_SIZE == 8
    assert settings.log_level == "INFO"
    assert settings.events_path is None


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should read TREEDRAG_-prefixed variables."""

    monkeypatch.setenv("TREEDRAG_GUTTER_SIZE", "4.5")
    monkeypatch.setenv("TREEDRAG_EVENTS_PATH", "events.jsonl")

    settings = load_settings()
    assert settings.gutter_size == 4.5
    assert settings.events_path == Path("events.jsonl")


def test_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """It should load the file named by TREEDRAG_ENV_FILE."""

    env = tmp_path / "custom.env"
    env.write_text("TREEDRAG_GUTTER_SIZE=20\n", encoding="utf-8")
    monkeypatch.setenv("TREEDRAG_ENV_FILE", str(env))

    assert load_settings().gutter_size == 20


def test_dotenv_in_cwd(tmp_path: Path) -> None:
    """It should pick up ./.env when present."""

    (tmp_path / ".env").write_text("TREEDRAG_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    assert load_settings().log_level == "DEBUG"


def test_negative_gutter_rejected() -> None:
    """It should refuse a negative configured gutter."""

    with pytest.raises(ValidationError):
        Settings(gutter_size=-1)
