# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Components receive settings by injection (tests pass a SimpleNamespace).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


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
    data_dir: Path

    # ---- Console ----
    console_enabled: bool
    confirm_delete: bool

    # ---- Board ----
    seed_demo: bool

    # ---- Timer ----
    tick_interval_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), True),
            confirm_delete=_env_bool(_k("CONFIRM_DELETE"), True),
            seed_demo=_env_bool(_k("SEED_DEMO"), True),
            tick_interval_seconds=_env_float(_k("TICK_INTERVAL_SECONDS"), 1.0),
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for the explicit switches below.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(SETTINGS, "console_enabled", bool(_config_local.CONSOLE_ENABLED))  # type: ignore[misc]
    if hasattr(_config_local, "SEED_DEMO"):
        object.__setattr__(SETTINGS, "seed_demo", bool(_config_local.SEED_DEMO))  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS
