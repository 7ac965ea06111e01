from __future__ import annotations

import re
from datetime import date, datetime

from yliw.models import (
    DAYS_PER_YEAR,
    EXPECTED_DAYS,
    WEEKS_PER_YEAR,
    LifeSummary,
)


class InvalidBirthdayError(ValueError):
    pass


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def parse_date(text: str) -> date:
    """Parse a strict ``DD-MM-YYYY`` date."""
    value = text.strip()
    match = re.fullmatch(r"(\d{2})-(\d{2})-(\d{4})", value, re.ASCII)
    if not match:
        raise InvalidBirthdayError(f"Birthday must be in DD-MM-YYYY format: {text!r}")

    day, month, year = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidBirthdayError(f"Invalid birthday: {text!r}") from exc


def age_in_days(birthday: str, today: date | None = None) -> int:
    born = parse_date(birthday)
    current = today if today is not None else datetime.now().date()
    return (current - born).days


def summarize(age_days: int, expected_days: int = EXPECTED_DAYS) -> LifeSummary:
    """Derive the life summary shown to the user from an age in days.

    Years are counted as whole weeks divided by 52, and remaining weeks as
    remaining whole years times 52. Both round toward zero.
    """
    age_in_weeks = age_days / 7
    whole_weeks = int(age_in_weeks)
    age_in_years = _div_toward_zero(whole_weeks, WEEKS_PER_YEAR)

    remaining_days = expected_days - age_days
    remaining_years = _div_toward_zero(remaining_days, DAYS_PER_YEAR)
    remaining_weeks = remaining_years * WEEKS_PER_YEAR

    return LifeSummary(
        age_in_days=age_days,
        age_in_weeks=age_in_weeks,
        age_in_years=age_in_years,
        expected_days=expected_days,
        remaining_days=remaining_days,
        remaining_years=remaining_years,
        remaining_weeks=remaining_weeks,
        completion_percent=age_days / expected_days * 100,
        lived_weeks=max(0, whole_weeks),
    )
