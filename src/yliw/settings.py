from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from yliw.errors import ConfigDirectoryError
from yliw.models import DEFAULT_FRAME_DELAY

APP_DIR_NAME = "yliw"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class Settings:
    config_path: Path
    frame_delay: float


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigDirectoryError("Failed to locate user's config directory") from exc


def config_dir() -> Path:
    """Return the per-user configuration directory for this platform."""
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise ConfigDirectoryError("Failed to locate user's config directory")
        return Path(appdata)

    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support"

    xdg = os.getenv("XDG_CONFIG_HOME", "").strip()
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return _home() / ".config"


def load_settings(config_path: Path | None = None, *, animate: bool = True) -> Settings:
    if config_path is None:
        config_path = config_dir() / APP_DIR_NAME / CONFIG_FILE_NAME

    return Settings(
        config_path=config_path,
        frame_delay=DEFAULT_FRAME_DELAY if animate else 0.0,
    )
