# src/snowy/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Every variable is prefixed with SNOWY_.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SNOWY"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Task file ----
    data_dir: Path
    task_file_name: str

    @property
    def task_file_path(self) -> Path:
        return self.data_dir / self.task_file_name

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Snowy") or "Snowy"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        task_file_name = _env(_k("TASK_FILE"), "snowy.txt").strip() or "snowy.txt"

        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            data_dir=data_dir,
            task_file_name=task_file_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real environment wins over .env.
    load_dotenv(override=False)
    return Settings.from_env()
