"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from typing import List

from dateutil.relativedelta import relativedelta

from wedding_planner.domain.exceptions import InvalidDateError


def as_date(value: date | str) -> date:
    """
    Coerce a date or ISO "YYYY-MM-DD" string to a date.

    Datetimes (and ISO datetime strings) are truncated to their calendar date.

    Raises:
        InvalidDateError: If the value is not a date or a parseable string
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError as e:
            raise InvalidDateError(f"Invalid date string: {value!r}") from e
    raise InvalidDateError(f"Expected a date, got {type(value).__name__}")


def month_start(day: date) -> date:
    return day.replace(day=1)


def shift_months(day: date, months: int) -> date:
    """
    Move a date by whole calendar months.

    Day-of-month overflow rolls into the following month instead of clamping:
    2025-03-31 shifted by -1 month is 2025-03-03 (February 31st rolls over).
    """
    shifted = month_start(day) + relativedelta(months=months)
    return shifted + timedelta(days=day.day - 1)


def generate_month_range(start: date, end: date) -> List[date]:
    """Generate first-of-month dates from start's month to end's month (inclusive)"""
    current = month_start(start)
    last = month_start(end)
    months = []
    while current <= last:
        months.append(current)
        current += relativedelta(months=1)
    return months
