from __future__ import annotations

import logging
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable

from yliw.errors import ConfigError, InputError
from yliw.models import UserConfig

LOGGER = logging.getLogger(__name__)

BIRTHDAY_PROMPT = "What is your birthday (DD-MM-YYYY)? "
KNOWN_KEYS = {"birthday", "show_weeks"}


def default_config() -> UserConfig:
    return UserConfig(birthday=None, show_weeks=True)


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string in DD-MM-YYYY format")
    return value.strip()


def _optional_bool(data: dict[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false")
    return value


def parse_config(text: str) -> UserConfig:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse config file: {exc}") from exc

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        LOGGER.debug("Ignoring unknown config keys: %s", ", ".join(unknown))

    return UserConfig(
        birthday=_optional_str(data, "birthday"),
        show_weeks=_optional_bool(data, "show_weeks"),
    )


def load_config(path: Path) -> UserConfig:
    if not path.exists():
        LOGGER.debug("No config file at %s, using defaults", path)
        return default_config()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc

    LOGGER.debug("Loaded config file %s", path)
    return parse_config(text)


def resolve_birthday(config: UserConfig, prompt: Callable[[str], str] = input) -> UserConfig:
    if config.birthday is not None:
        return config

    try:
        answer = prompt(BIRTHDAY_PROMPT)
    except (EOFError, OSError) as exc:
        raise InputError("Failed to read input.") from exc

    return replace(config, birthday=answer.strip())


def show_weeks_enabled(config: UserConfig) -> bool:
    return True if config.show_weeks is None else config.show_weeks
