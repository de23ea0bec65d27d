"""Settings resolved from command-line overrides and environment variables."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TODOLIST"

DEFAULT_FILENAME = ".todolist.json"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def default_data_file() -> Path:
    return Path.home() / DEFAULT_FILENAME


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: int = logging.WARNING


def load_settings(data_file: Optional[str] = None, verbosity: int = 0) -> Settings:
    """
    Explicit arguments win over the environment:
    - data_file: --file, then TODOLIST_FILE, then ~/.todolist.json
    - verbosity: -v is INFO, -vv is DEBUG, else TODOLIST_LOG_LEVEL, else WARNING
    """
    if data_file:
        path = Path(data_file).expanduser()
    else:
        path = _env_path(_k("FILE"), default_data_file())

    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = _env_log_level(_k("LOG_LEVEL"), logging.WARNING)

    return Settings(data_file=path, log_level=level)
