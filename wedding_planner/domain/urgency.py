"""Urgency and budget-health classification"""

from datetime import date

from wedding_planner.domain.models import BudgetStatus, Urgency
from wedding_planner.utils.date_utils import as_date


def classify_urgency(
    due_date: date | str | None,
    today: date | None = None,
    window_days: int = 7,
) -> Urgency:
    """
    Classify a due date relative to today.

    Rules (calendar dates only, no time-of-day or timezone conversion):
    - No due date:                 no_date
    - Before today:                overdue
    - Today through today + 7:     this_week
    - Later:                       upcoming

    Args:
        due_date: Date the obligation falls due, or None
        today: Reference date (default: date.today(), read on every call)
        window_days: Inclusive length of the "this week" window
    """
    if due_date is None:
        return Urgency.NO_DATE
    if today is None:
        today = date.today()

    days_until = (as_date(due_date) - today).days
    if days_until < 0:
        return Urgency.OVERDUE
    elif days_until <= window_days:
        return Urgency.THIS_WEEK
    else:
        return Urgency.UPCOMING


def classify_milestone_urgency(
    target_date: date | str,
    today: date | None = None,
    window_days: int = 7,
) -> Urgency:
    """Same rule as payments; milestones always carry a target date"""
    return classify_urgency(as_date(target_date), today, window_days)


def get_budget_status(total_budget: float, total_spent: float) -> BudgetStatus:
    """
    Traffic-light status for overall spend against budget.

    - Budget <= 0:          green (nothing to measure against)
    - Spent < 90%:          green
    - 90% <= spent <= 100%: yellow
    - Spent > 100%:         red
    """
    if total_budget <= 0:
        return BudgetStatus.GREEN

    ratio = total_spent / total_budget
    if ratio > 1:
        return BudgetStatus.RED
    elif ratio >= 0.9:
        return BudgetStatus.YELLOW
    else:
        return BudgetStatus.GREEN


def get_category_status(target_amount: float, actual_spend: float) -> BudgetStatus:
    """Red when spend exceeds the target, yellow within 10% of a positive target"""
    if actual_spend > target_amount:
        return BudgetStatus.RED
    if target_amount > 0 and actual_spend >= target_amount * 0.9:
        return BudgetStatus.YELLOW
    return BudgetStatus.GREEN
