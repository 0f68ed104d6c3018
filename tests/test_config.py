# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from taskcli.config import Settings


def test_defaults_without_env() -> None:
    settings = Settings.from_env({})

    assert settings.tasks_file == Path("tasks.json")
    assert settings.log_level == "INFO"


def test_env_overrides() -> None:
    settings = Settings.from_env({"TASKCLI_FILE": "~/todo.json", "TASKCLI_LOG_LEVEL": "debug"})

    assert settings.tasks_file == Path("~/todo.json").expanduser()
    assert settings.log_level == "DEBUG"


def test_blank_env_values_fall_back_to_defaults() -> None:
    settings = Settings.from_env({"TASKCLI_FILE": "  ", "TASKCLI_LOG_LEVEL": ""})

    assert settings == Settings()


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        Settings.from_env({"TASKCLI_LOG_LEVEL": "loud"})
