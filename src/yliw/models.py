from __future__ import annotations

from dataclasses import dataclass


EXPECTED_YEARS = 90
DAYS_PER_YEAR = 365
WEEKS_PER_YEAR = 52
EXPECTED_DAYS = EXPECTED_YEARS * DAYS_PER_YEAR

GRID_ROWS = 30
GRID_COLUMNS = 156
GRID_CELL = "="

PROGRESS_BAR_WIDTH = 70
PROGRESS_BAR = "=>-"
DEFAULT_FRAME_DELAY = 0.02


@dataclass(frozen=True)
class UserConfig:
    birthday: str | None
    show_weeks: bool | None


@dataclass(frozen=True)
class LifeSummary:
    age_in_days: int
    age_in_weeks: float
    age_in_years: int
    expected_days: int
    remaining_days: int
    remaining_years: int
    remaining_weeks: int
    completion_percent: float
    lived_weeks: int
