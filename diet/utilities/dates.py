"""Shared date and rounding helpers for the plan engine and presentation layer."""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Tuple, Union

from diet.domain.errors import DateParseError
from diet.utilities.constants import DATE_FORMAT, DAYS_PER_WEEK

__all__ = ["parse_start_date", "week_window", "format_date", "round_half_up"]


def parse_start_date(value: Union[str, date]) -> date:
    """Parse a plan start date given as ``YYYY-MM-DD`` (or an existing date).

    Raises DateParseError for anything that is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(value)
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(value) from e


def week_window(start: date) -> Tuple[date, date]:
    """Return the inclusive (start, end) of the 7-day week beginning at ``start``."""
    return start, start + timedelta(days=DAYS_PER_WEEK - 1)


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
