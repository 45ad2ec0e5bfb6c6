"""Tests for configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from todocal.config import TodoCalConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TODOCAL_DATA_DIR",
        "TODOCAL_STORE_FILENAME",
        "TODOCAL_STORAGE_BACKEND",
        "TODOCAL_LOG_DIR",
        "TODOCAL_LOG_FILENAME",
        "TODOCAL_WEEK_STARTS_ON",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults():
    """Test TodoCalConfig default values."""
    config = TodoCalConfig()
    assert config.data_dir == Path("data")
    assert config.store_path == Path("data/calendar-todos.json")
    assert config.storage_backend == "json"
    assert config.week_starts_on == 0
    assert config.log_dir == Path("logs")


def test_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("TODOCAL_DATA_DIR", "/custom/data")
    monkeypatch.setenv("TODOCAL_STORE_FILENAME", "todos.json")
    monkeypatch.setenv("TODOCAL_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("TODOCAL_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("TODOCAL_LOG_FILENAME", "app.log")
    monkeypatch.setenv("TODOCAL_WEEK_STARTS_ON", "1")

    config = TodoCalConfig.from_env()
    assert config.store_path == Path("/custom/data/todos.json")
    assert config.storage_backend == "memory"
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "app.log"
    assert config.week_starts_on == 1


@pytest.mark.parametrize("value", ["monday", "7", "-1"])
def test_config_invalid_week_start_keeps_default(monkeypatch, value):
    monkeypatch.setenv("TODOCAL_WEEK_STARTS_ON", value)
    assert TodoCalConfig.from_env().week_starts_on == 0


def test_config_week_start_validated():
    with pytest.raises(PydanticValidationError):
        TodoCalConfig(week_starts_on=7)


def test_config_from_env_file(tmp_path, monkeypatch):
    """A .env file in the working directory is picked up."""
    (tmp_path / ".env").write_text(
        "TODOCAL_STORE_FILENAME=from-dotenv.json\nTODOCAL_WEEK_STARTS_ON=1\n"
    )
    monkeypatch.chdir(tmp_path)
    # Register the variables so values loaded from .env are removed afterwards
    for name in ("TODOCAL_STORE_FILENAME", "TODOCAL_WEEK_STARTS_ON"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    config = TodoCalConfig.from_env()
    assert config.store_filename == "from-dotenv.json"
    assert config.week_starts_on == 1


def test_config_environment_overrides_env_file(tmp_path, monkeypatch):
    """Real environment variables win over .env values."""
    (tmp_path / ".env").write_text("TODOCAL_STORE_FILENAME=from-dotenv.json\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODOCAL_STORE_FILENAME", "from-env.json")

    assert TodoCalConfig.from_env().store_filename == "from-env.json"
