"""Relative-date calculations for milestone scheduling and the Gantt timeline"""

import math
from datetime import date, timedelta
from typing import Iterable, List

from wedding_planner.domain.models import MonthMarker, TimelineWindow
from wedding_planner.domain.numeric import round_half_up, sanitize_numeric_string
from wedding_planner.utils.date_utils import as_date, month_start, shift_months

DAYS_PER_MONTH = 30  # Approximation used for fractional months


def calculate_target_date(anchor: date | str, months_before: float) -> date:
    """
    Calculate the date months_before the anchor (usually the wedding date).

    Whole months are subtracted on the calendar; the fractional remainder is
    approximated as 30-day months, so 0.5 is exactly 15 days and 0.25 is 8.

    Example:
        2025-12-20, 3   -> 2025-09-20
        2025-12-20, 0.5 -> 2025-12-05
    """
    anchor = as_date(anchor)
    whole_months = math.floor(months_before)
    fractional_days = round_half_up((months_before - whole_months) * DAYS_PER_MONTH)

    shifted = shift_months(anchor, -whole_months)
    return shifted - timedelta(days=fractional_days)


def get_months_between(start: date | str, end: date | str) -> float:
    """Signed, possibly fractional month distance using 30-day months for days"""
    start = as_date(start)
    end = as_date(end)
    return (
        (end.year - start.year) * 12
        + (end.month - start.month)
        + (end.day - start.day) / DAYS_PER_MONTH
    )


def get_gantt_position(target: date | str, timeline_start: date | str, timeline_end: date | str) -> float:
    """
    Percentage position of a date within a timeline window, clamped to 0-100.

    A zero-length window places everything at 0.
    """
    target = as_date(target)
    start = as_date(timeline_start)
    end = as_date(timeline_end)

    span_days = (end - start).days
    if span_days == 0:
        return 0.0
    pct = (target - start).days / span_days * 100
    return max(0.0, min(100.0, pct))


def format_relative_months(months_before: float) -> str:
    """
    Human-readable label for a months-before offset.

    Example:
        12   -> "1 year before"
        14   -> "1y 2mo before"
        6    -> "6 months before"
        0.5  -> "2 weeks before"
    """
    if months_before >= 12:
        years = math.floor(months_before / 12)
        remaining = months_before % 12
        if remaining == 0:
            return "1 year before" if years == 1 else f"{years} years before"
        return f"{years}y {sanitize_numeric_string(remaining)}mo before"

    if months_before >= 1:
        whole = math.floor(months_before)
        return "1 month before" if whole == 1 else f"{whole} months before"

    weeks = round_half_up(months_before * 4)
    return "1 week before" if weeks == 1 else f"{weeks} weeks before"


def get_timeline_bounds(
    target_dates: Iterable[date | str],
    wedding_date: date | str,
    today: date | None = None,
    padding_months: int = 1,
) -> TimelineWindow:
    """
    Compute the visible window for the Gantt view.

    Starts one padding period before the earlier of today and the earliest
    target date, and ends one padding period after the wedding.

    Args:
        target_dates: Milestone target dates
        wedding_date: Anchor date the milestones count back from
        today: Reference date (default: date.today(), read per call)
        padding_months: Whole months added on each side
    """
    if today is None:
        today = date.today()

    earliest = min([today, *(as_date(d) for d in target_dates)])
    start = shift_months(earliest, -padding_months)
    end = shift_months(as_date(wedding_date), padding_months)

    return TimelineWindow(
        start=start,
        end=end,
        today=today,
        total_months=max(get_months_between(start, end), 1),
    )


def get_month_markers(start: date | str, end: date | str) -> List[MonthMarker]:
    """First-of-month gridlines strictly after start and up to end, labelled "Jan 25" """
    start = as_date(start)
    end = as_date(end)

    current = shift_months(month_start(start), 1)
    markers = []
    while current <= end:
        markers.append(MonthMarker(marker_date=current, label=current.strftime("%b %y")))
        current = shift_months(current, 1)
    return markers
