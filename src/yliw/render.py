from __future__ import annotations

import time
from typing import Callable

from rich.console import Console
from rich.progress import Progress, ProgressColumn, Task
from rich.text import Text

from yliw.models import (
    DEFAULT_FRAME_DELAY,
    EXPECTED_YEARS,
    GRID_CELL,
    GRID_COLUMNS,
    GRID_ROWS,
    PROGRESS_BAR,
    PROGRESS_BAR_WIDTH,
    LifeSummary,
)

WELCOME_MESSAGE = "Welcome to Life!"
WEEKS_HEADER = "Your life in weeks:"

Sleep = Callable[[float], None]


def _pause(delay: float, sleep: Sleep) -> None:
    if delay > 0:
        sleep(delay)


def display_welcome_message(console: Console) -> None:
    console.print(WELCOME_MESSAGE, style="green", highlight=False)
    console.print()


def display_age(console: Console, age_in_years: int) -> None:
    console.print(f"You are {age_in_years} years old!", style="italic", highlight=False)
    console.print()


def bar_text(completed: float, total: float, width: int = PROGRESS_BAR_WIDTH) -> Text:
    """Render ``[===>---]`` with the filled part green and the rest cyan."""
    fill, head, rest = PROGRESS_BAR
    ratio = min(max(completed / total, 0.0), 1.0) if total > 0 else 0.0
    filled = int(width * ratio)
    if filled < width:
        lived = fill * filled + head
        remaining = rest * (width - filled - 1)
    else:
        lived = fill * width
        remaining = ""
    return Text.assemble("[", (lived, "green"), (remaining, "cyan"), "]")


class LifeBarColumn(ProgressColumn):
    def __init__(self, bar_width: int = PROGRESS_BAR_WIDTH) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        return bar_text(task.completed, task.total or 0, self.bar_width)


def create_progress_bar(console: Console) -> Progress:
    return Progress(
        LifeBarColumn(),
        console=console,
        auto_refresh=False,
    )


def display_progress_bar(
    console: Console,
    age_in_years: int,
    *,
    total: int = EXPECTED_YEARS,
    delay: float = DEFAULT_FRAME_DELAY,
    sleep: Sleep = time.sleep,
) -> None:
    """Fill the lifespan bar one year at a time, up to and including ``age_in_years``."""
    with create_progress_bar(console) as progress:
        task_id = progress.add_task("life", total=total)
        for year in range(age_in_years + 1):
            progress.update(task_id, completed=year, refresh=True)
            _pause(delay, sleep)
    console.print()


def format_summary_message(summary: LifeSummary) -> str:
    return (
        f"\n\n[bold green]Your life is {summary.completion_percent:.2f}% complete![/]\n\n"
        "Looking ahead, here's what's still in store for you:\n\n"
        f"- Celebrate: [yellow]{summary.remaining_years} wonderful[/] more birthdays\n"
        f"- Relax: [cyan]{summary.remaining_weeks} relaxing[/] more weekends\n"
        f"- Enjoy: [magenta]{summary.remaining_days} delicious[/] more breakfasts\n"
    )


def display_summary_message(console: Console, summary: LifeSummary) -> None:
    console.print(format_summary_message(summary), highlight=False)


def weeks_row(row: int, lived_weeks: int) -> Text:
    lived_in_row = min(max(lived_weeks - row * GRID_COLUMNS, 0), GRID_COLUMNS)
    return Text.assemble(
        (GRID_CELL * lived_in_row, "green"),
        (GRID_CELL * (GRID_COLUMNS - lived_in_row), "cyan"),
    )


def print_life_in_weeks(
    console: Console,
    lived_weeks: int,
    *,
    delay: float = DEFAULT_FRAME_DELAY,
    sleep: Sleep = time.sleep,
) -> None:
    """Draw one cell per week of a 90-year life, lived weeks in green."""
    console.print()
    console.print(WEEKS_HEADER, style="bold", highlight=False)
    console.print()
    for row in range(GRID_ROWS):
        console.print(weeks_row(row, lived_weeks), soft_wrap=True)
        _pause(delay, sleep)
