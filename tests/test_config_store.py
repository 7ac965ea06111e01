from pathlib import Path

import pytest

from yliw.config_store import (
    BIRTHDAY_PROMPT,
    load_config,
    resolve_birthday,
    show_weeks_enabled,
)
from yliw.errors import ConfigError, InputError
from yliw.models import UserConfig


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "yliw" / "config.toml")

    assert config == UserConfig(birthday=None, show_weeks=True)
    assert show_weeks_enabled(config) is True


def test_load_full_config(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('birthday = "21-12-1990"\nshow_weeks = false\n', encoding="utf-8")

    config = load_config(path)

    assert config.birthday == "21-12-1990"
    assert config.show_weeks is False
    assert show_weeks_enabled(config) is False


def test_missing_keys_default_to_none(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("# nothing configured yet\n", encoding="utf-8")

    config = load_config(path)

    assert config == UserConfig(birthday=None, show_weeks=None)
    assert show_weeks_enabled(config) is True


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        """
birthday = "01-01-2000"
theme = "dark"

[extra]
enabled = true
""".strip()
        + "\n",
        encoding="utf-8",
    )

    assert load_config(path) == UserConfig(birthday="01-01-2000", show_weeks=None)


def test_malformed_toml_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('birthday = "01-01-2000\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("body", ['show_weeks = "yes"\n', "birthday = 1990\n"])
def test_wrong_value_types_rejected(tmp_path: Path, body: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_resolve_birthday_keeps_configured_value() -> None:
    config = UserConfig(birthday="01-01-2000", show_weeks=True)

    def fail_prompt(message: str) -> str:
        raise AssertionError("prompt should not be called")

    assert resolve_birthday(config, fail_prompt) is config


def test_resolve_birthday_prompts_when_missing() -> None:
    prompts: list[str] = []

    def fake_prompt(message: str) -> str:
        prompts.append(message)
        return "  21-12-1990 \n"

    config = resolve_birthday(UserConfig(birthday=None, show_weeks=False), fake_prompt)

    assert prompts == [BIRTHDAY_PROMPT]
    assert config == UserConfig(birthday="21-12-1990", show_weeks=False)


def test_resolve_birthday_wraps_eof() -> None:
    def closed_stdin(message: str) -> str:
        raise EOFError

    with pytest.raises(InputError):
        resolve_birthday(UserConfig(birthday=None, show_weeks=True), closed_stdin)


@pytest.mark.parametrize("body", ['birthday = ""\n', 'birthday = "   "\n'])
def test_blank_configured_birthday_is_kept(tmp_path: Path, body: str) -> None:
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")

    def fail_prompt(message: str) -> str:
        raise AssertionError("prompt should not be called")

    config = resolve_birthday(load_config(path), fail_prompt)

    assert config.birthday == ""
