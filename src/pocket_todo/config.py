# src/pocket_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing about tasks is configured here: tasks are never persisted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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

    # ---- Screen ----
    clear_screen: bool
    color: bool
    screen_width: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "My To-Do").strip() or "My To-Do"
        # Empty by default: no console logging, the redrawn screen owns the terminal.
        log_level = _env(_k("LOG_LEVEL"), "").strip()
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/pocket_todo"))

        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)
        # https://no-color.org: presence of NO_COLOR disables styling regardless of value.
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None
        screen_width = max(0, _env_int(_k("SCREEN_WIDTH"), 0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            clear_screen=clear_screen,
            color=color,
            screen_width=screen_width,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
