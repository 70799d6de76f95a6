"""Vendor payment plan generation from split templates"""

from datetime import date, timedelta
from typing import List, Tuple

from wedding_planner.domain.models import PaymentSplit, PaymentTemplate, PlannedPayment
from wedding_planner.domain.numeric import round2
from wedding_planner.utils.date_utils import as_date, shift_months

PAYMENT_TEMPLATES: Tuple[PaymentTemplate, ...] = (
    PaymentTemplate(
        name="50/50 Deposit + Final",
        splits=(
            PaymentSplit("Deposit", 50, months_before=6),
            PaymentSplit("Final Payment", 50, months_before=1),
        ),
    ),
    PaymentTemplate(
        name="30/30/40 Three-Payment",
        splits=(
            PaymentSplit("First Payment", 30, months_before=8),
            PaymentSplit("Second Payment", 30, months_before=4),
            PaymentSplit("Final Payment", 40, months_before=1),
        ),
    ),
    PaymentTemplate(
        name="100% Upfront",
        splits=(PaymentSplit("Full Payment", 100),),
    ),
)


def get_payment_template(name: str) -> PaymentTemplate | None:
    return next((t for t in PAYMENT_TEMPLATES if t.name == name), None)


def compute_due_date(
    wedding_date: date | str | None,
    months_before: float | None,
    today: date,
    min_lead_days: int = 7,
) -> date | None:
    """
    Due date months_before the wedding.

    Dates already in the past are moved to today + min_lead_days. Without a
    wedding date or an offset there is no due date.
    """
    if wedding_date is None or months_before is None:
        return None

    due = shift_months(as_date(wedding_date), -int(months_before))
    if due < today:
        return today + timedelta(days=min_lead_days)
    return due


def generate_payment_plan(
    actual_cost: float,
    template: PaymentTemplate,
    wedding_date: date | str | None = None,
    today: date | None = None,
    min_lead_days: int = 7,
) -> List[PlannedPayment]:
    """
    Split a vendor's actual cost into scheduled payments.

    Requirements:
    - Each split is its percent of the cost, rounded to cents
    - Last payment absorbs the rounding remainder so the plan sums exactly
    - Due dates count back from the wedding date

    Args:
        actual_cost: Total vendor cost to split
        template: Split percentages and offsets
        wedding_date: Anchor for due dates (None leaves payments undated)
        today: Reference date (default: date.today(), read per call)
        min_lead_days: Lead time given to due dates that are already past

    Example:
        $1000.01 with 30/30/40 -> [$300.00, $300.00, $400.01]
    """
    if actual_cost <= 0 or not template.splits:
        return []

    if today is None:
        today = date.today()

    payments = [
        PlannedPayment(
            label=split.label,
            amount=round2(actual_cost * split.percent / 100),
            due_date=compute_due_date(wedding_date, split.months_before, today, min_lead_days),
        )
        for split in template.splits
    ]

    # Last payment absorbs remainder to ensure exact total
    total_so_far = sum(p.amount for p in payments[:-1])
    payments[-1].amount = round2(actual_cost - total_so_far)

    return payments
