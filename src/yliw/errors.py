from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_BIRTHDAY = 1
    CONFIG_ERROR = 2
    INPUT_ERROR = 3
    INTERRUPTED = 130


class YliwError(Exception):
    exit_code = ExitCode.CONFIG_ERROR


class ConfigError(YliwError):
    exit_code = ExitCode.CONFIG_ERROR


class ConfigDirectoryError(ConfigError):
    pass


class InputError(YliwError):
    exit_code = ExitCode.INPUT_ERROR
