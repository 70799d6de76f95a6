"""Unit tests for urgency and budget-status classification"""

import pytest
from datetime import date
from freezegun import freeze_time
from wedding_planner.domain.exceptions import InvalidDateError
from wedding_planner.domain.models import BudgetStatus, Urgency
from wedding_planner.domain.urgency import (
    classify_milestone_urgency,
    classify_urgency,
    get_budget_status,
    get_category_status,
)


@pytest.mark.parametrize(
    "due_date, expected",
    [
        (date(2025, 6, 14), Urgency.OVERDUE),
        (date(2025, 1, 1), Urgency.OVERDUE),
        (date(2025, 6, 15), Urgency.THIS_WEEK),
        (date(2025, 6, 22), Urgency.THIS_WEEK),  # today + 7 is still this week
        (date(2025, 6, 23), Urgency.UPCOMING),
        (None, Urgency.NO_DATE),
    ],
)
def test_classify_urgency(today, due_date, expected):
    """Test overdue, this week, upcoming and no date boundaries"""
    assert classify_urgency(due_date, today) == expected


def test_classify_urgency_accepts_iso_strings(today):
    """Test ISO date and datetime strings"""
    assert classify_urgency("2025-06-14", today) == Urgency.OVERDUE
    assert classify_urgency("2025-06-20T18:30:00", today) == Urgency.THIS_WEEK


def test_classify_urgency_custom_window(today):
    """Test configurable this-week window"""
    assert classify_urgency(date(2025, 6, 25), today, window_days=14) == Urgency.THIS_WEEK


def test_classify_urgency_rejects_malformed_date(today):
    """Test malformed date raises InvalidDateError"""
    with pytest.raises(InvalidDateError):
        classify_urgency("06/14/2025", today)


@freeze_time("2025-06-15")
def test_classify_urgency_defaults_to_current_date():
    """Test omitted today uses the current date"""
    assert classify_urgency(date(2025, 6, 14)) == Urgency.OVERDUE
    assert classify_urgency(date(2025, 6, 16)) == Urgency.THIS_WEEK


def test_today_is_read_on_every_call():
    """Test current date is not cached between calls"""
    with freeze_time("2025-06-15"):
        assert classify_urgency(date(2025, 6, 30)) == Urgency.UPCOMING
    with freeze_time("2025-06-25"):
        assert classify_urgency(date(2025, 6, 30)) == Urgency.THIS_WEEK


def test_classify_milestone_urgency(today):
    """Test milestones use the payment urgency rule"""
    assert classify_milestone_urgency(date(2025, 5, 1), today) == Urgency.OVERDUE
    assert classify_milestone_urgency("2025-08-01", today) == Urgency.UPCOMING


def test_urgency_rank_order():
    """Test urgency ranks most to least pressing"""
    ranked = sorted(Urgency, key=lambda u: u.rank)
    assert ranked == [Urgency.OVERDUE, Urgency.THIS_WEEK, Urgency.UPCOMING, Urgency.NO_DATE]


@pytest.mark.parametrize(
    "budget, spent, expected",
    [
        (100_000, 0, BudgetStatus.GREEN),
        (100_000, 89_999, BudgetStatus.GREEN),
        (100_000, 90_000, BudgetStatus.YELLOW),
        (100_000, 100_000, BudgetStatus.YELLOW),
        (100_000, 100_001, BudgetStatus.RED),
        (0, 5_000, BudgetStatus.GREEN),
        (-10, 5_000, BudgetStatus.GREEN),
    ],
)
def test_get_budget_status(budget, spent, expected):
    """Test green, yellow and red thresholds on total spend"""
    assert get_budget_status(budget, spent) == expected


@pytest.mark.parametrize(
    "target, spent, expected",
    [
        (1_000, 1_001, BudgetStatus.RED),
        (1_000, 1_000, BudgetStatus.YELLOW),
        (1_000, 900, BudgetStatus.YELLOW),
        (1_000, 899, BudgetStatus.GREEN),
        (0, 0, BudgetStatus.GREEN),
        (0, 1, BudgetStatus.RED),
    ],
)
def test_get_category_status(target, spent, expected):
    """Test category status against its target"""
    assert get_category_status(target, spent) == expected
