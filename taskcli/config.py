"""Settings resolved from environment variables.

TASKCLI_FILE       snapshot path (default: tasks.json in the working directory)
TASKCLI_LOG_LEVEL  logging level name (default: INFO)

Command-line flags override both.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .store import DEFAULT_TASKS_FILE

ENV_PREFIX = "TASKCLI"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


class Settings(BaseModel):
    tasks_file: Path = Path(DEFAULT_TASKS_FILE)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}

        raw_file = env.get(_k("FILE"), "").strip()
        if raw_file:
            values["tasks_file"] = Path(raw_file).expanduser()

        raw_level = env.get(_k("LOG_LEVEL"), "").strip()
        if raw_level:
            values["log_level"] = raw_level

        return cls(**values)
