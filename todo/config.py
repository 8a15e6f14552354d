"""Settings for todo-cli, resolved from command-line flags and environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from todo.storage import DEFAULT_FILE

FILE_ENV = "TODO_FILE"
LOG_LEVEL_ENV = "TODO_LOG_LEVEL"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        file_path: Backing file for the task list
        log_level: Minimum level of log records written to stderr
    """

    file_path: Path
    log_level: int = logging.WARNING


def load_settings(file_path: Optional[str] = None, verbose: bool = False) -> Settings:
    """Build Settings, letting explicit arguments override the environment.

    Args:
        file_path: Backing file from the command line, if given
        verbose: Force DEBUG logging

    Returns:
        Resolved Settings
    """
    if file_path is None:
        file_path = _env(FILE_ENV, DEFAULT_FILE)

    if verbose:
        level = logging.DEBUG
    else:
        level = _log_level(_env(LOG_LEVEL_ENV, "WARNING"))

    return Settings(file_path=Path(file_path).expanduser(), log_level=level)
