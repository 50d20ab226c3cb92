"""Settings loaded from environment variables (+ optional .env).

All variables use the TASKNOOK_ prefix. Command-line options given to the
``tasknook`` entry point take precedence over anything resolved here.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from storage import DEFAULT_TASKS_FILE

ENV_PREFIX = "TASKNOOK"

DEFAULT_PALETTE: Dict[str, str] = {
    "todo": "#48B3AF",
    "deadline": "#476EAE",
    "event": "#F6FF99",
    "done": "#A7E399",
    "error": "#E06C75",
}


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    level = logging.getLevelName(raw) if raw else default
    return level if isinstance(level, int) else default


def _env_hex(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().lstrip("#")
    if len(raw) == 6 and all(c in "0123456789abcdefABCDEF" for c in raw):
        return "#" + raw
    return default


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_TASKS_FILE
    log_file: Optional[Path] = None
    log_level: int = logging.WARNING
    color: bool = True
    palette: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PALETTE))

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(override=False)
        palette = {
            name: _env_hex(_k(f"COLOR_{name.upper()}"), default)
            for name, default in DEFAULT_PALETTE.items()
        }
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None
        return Settings(
            data_file=_env_path(_k("DATA_FILE"), DEFAULT_TASKS_FILE) or DEFAULT_TASKS_FILE,
            log_file=_env_path(_k("LOG_FILE"), None),
            log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
            color=color,
            palette=palette,
        )
