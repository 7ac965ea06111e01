from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import date
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable

from rich.console import Console

from yliw.config_store import load_config, resolve_birthday, show_weeks_enabled
from yliw.date_logic import InvalidBirthdayError, age_in_days, summarize
from yliw.errors import ExitCode, YliwError
from yliw.render import (
    display_age,
    display_progress_bar,
    display_summary_message,
    display_welcome_message,
    print_life_in_weeks,
)
from yliw.settings import Settings, load_settings

LOGGER = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Unable to parse the date. Please use DD-MM-YYYY."


def package_version() -> str:
    try:
        return version("yliw")
    except PackageNotFoundError:
        return "unknown"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yliw",
        description="See how much of a 90-year life you have lived, in years and in weeks.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the config file (default: <config-dir>/yliw/config.toml).",
    )
    parser.add_argument(
        "--no-animation",
        dest="animate",
        action="store_false",
        default=True,
        help="Render everything at once without frame delays.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log diagnostics to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {package_version()}",
    )
    return parser


def run(
    settings: Settings,
    console: Console,
    prompt: Callable[[str], str] = input,
    *,
    today: date | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    display_welcome_message(console)

    LOGGER.info("Using config file %s", settings.config_path)
    config = resolve_birthday(load_config(settings.config_path), prompt)

    summary = summarize(age_in_days(config.birthday or "", today))

    display_age(console, summary.age_in_years)
    display_progress_bar(console, summary.age_in_years, delay=settings.frame_delay, sleep=sleep)
    display_summary_message(console, summary)

    if show_weeks_enabled(config):
        print_life_in_weeks(console, summary.lived_weeks, delay=settings.frame_delay, sleep=sleep)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    console = Console(highlight=False)
    error_console = Console(stderr=True, highlight=False)

    try:
        settings = load_settings(args.config, animate=args.animate)
        run(settings, console, prompt=console.input)
    except InvalidBirthdayError as exc:
        LOGGER.debug("Birthday rejected: %s", exc)
        error_console.print(PARSE_ERROR_MESSAGE, style="red")
        return ExitCode.INVALID_BIRTHDAY
    except YliwError as exc:
        LOGGER.debug("Run failed", exc_info=True)
        error_console.print(str(exc), style="red", markup=False)
        return exc.exit_code
    except KeyboardInterrupt:
        console.print()
        return ExitCode.INTERRUPTED

    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
