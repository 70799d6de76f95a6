"""Financial aggregation - rolls line items and payments up into dashboard data"""

from datetime import date
from typing import Dict, Iterable, Iterator, List, Tuple

from wedding_planner.domain.models import (
    CashFlowPoint,
    Category,
    CategoryAllocationPoint,
    FinancialPosition,
    LineItem,
    Payment,
    PaymentStatus,
    ScheduledPayment,
    VendorTotals,
)
from wedding_planner.domain.numeric import round2
from wedding_planner.domain.urgency import classify_urgency
from wedding_planner.utils.date_utils import as_date, generate_month_range, month_start


def _iter_payments(categories: Iterable[Category]) -> Iterator[Tuple[Category, LineItem, Payment]]:
    for category in categories:
        for line_item in category.line_items:
            for payment in line_item.payments:
                yield category, line_item, payment


def _effective_date(payment: Payment) -> date | None:
    """Paid date for completed payments, due date otherwise"""
    if payment.status == PaymentStatus.PAID and payment.paid_date is not None:
        return payment.paid_date
    return payment.due_date


def _month_label(month: date, is_first: bool) -> str:
    """Short axis label; the first point and every January carry the year"""
    if is_first or month.month == 1:
        return month.strftime("%b '%y")
    return month.strftime("%b")


def build_cash_flow_data(
    categories: Iterable[Category],
    anchor_date: date | str,
    today: date | None = None,
    through: date | str | None = None,
) -> List[CashFlowPoint]:
    """
    Group payments into monthly paid / upcoming totals for a stacked bar chart.

    Each payment lands in the month of its effective date (paid date when
    paid, due date otherwise); payments with neither are left out. The series
    is contiguous: every month from the earliest of anchor_date, today and the
    first payment through the latest of today, the last payment and `through`
    appears once, with zeros where nothing falls.

    Args:
        categories: Categories with line items and payments
        anchor_date: Start of the default window (the client's creation date)
        today: Reference date (default: date.today(), read per call)
        through: Optional date the window must reach (e.g. the wedding date)
    """
    if today is None:
        today = date.today()

    buckets: Dict[date, Dict[str, float]] = {}
    for _, _, payment in _iter_payments(categories):
        effective = _effective_date(payment)
        if effective is None:
            continue

        bucket = buckets.setdefault(month_start(effective), {"paid": 0.0, "upcoming": 0.0})
        if payment.status == PaymentStatus.PAID:
            bucket["paid"] += payment.amount
        else:
            bucket["upcoming"] += payment.amount

    start_candidates = [as_date(anchor_date), today, *buckets]
    end_candidates = [today, *buckets]
    if through is not None:
        end_candidates.append(as_date(through))

    months = generate_month_range(min(start_candidates), max(end_candidates))

    points = []
    for index, month in enumerate(months):
        bucket = buckets.get(month, {"paid": 0.0, "upcoming": 0.0})
        points.append(
            CashFlowPoint(
                month_start=month,
                month=month.strftime("%b %Y"),
                label=_month_label(month, is_first=index == 0),
                paid=round2(bucket["paid"]),
                upcoming=round2(bucket["upcoming"]),
            )
        )
    return points


def build_category_allocation_data(categories: Iterable[Category]) -> List[CategoryAllocationPoint]:
    """Pie chart slices for categories with a positive target amount"""
    return [
        CategoryAllocationPoint(name=cat.name, value=cat.target_amount, spent=cat.actual_spend)
        for cat in categories
        if cat.target_amount > 0
    ]


def build_paid_vs_remaining_data(categories: Iterable[Category], total_budget: float) -> FinancialPosition:
    """
    Compute the overall financial position.

    - total_committed: sum of line item actual costs (unclamped)
    - total_paid:      sum of line item paid amounts (unclamped)
    - total_pending:   committed not yet paid, floored at 0
    - uncommitted:     budget not yet committed, floored at 0

    Over-budget and over-paid amounts stay recoverable from the unclamped
    fields (see FinancialPosition.over_budget / over_paid).
    """
    total_committed = 0.0
    total_paid = 0.0
    for category in categories:
        for line_item in category.line_items:
            total_committed += line_item.actual_cost
            total_paid += line_item.amount_paid

    total_pending = max(0.0, total_committed - total_paid)
    uncommitted = max(0.0, total_budget - total_committed)

    return FinancialPosition(
        total_budget=total_budget,
        total_committed=round2(total_committed),
        total_paid=round2(total_paid),
        total_pending=round2(total_pending),
        uncommitted=round2(uncommitted),
    )


def build_payment_schedule_data(
    categories: Iterable[Category],
    today: date | None = None,
    window_days: int = 7,
) -> List[ScheduledPayment]:
    """
    Flatten outstanding payments into a schedule, most urgent first.

    Paid payments are excluded. Ordering: overdue, this week, upcoming, no
    date; within the same urgency by due date ascending, dated before
    undated. The sort is stable, so ties keep category / line item order.
    """
    if today is None:
        today = date.today()

    payments = [
        ScheduledPayment(
            payment_id=payment.payment_id,
            vendor_name=line_item.vendor_name,
            category_name=category.name,
            label=payment.label,
            amount=payment.amount,
            due_date=payment.due_date,
            status=payment.status,
            urgency=classify_urgency(payment.due_date, today, window_days),
        )
        for category, line_item, payment in _iter_payments(categories)
        if payment.status != PaymentStatus.PAID
    ]

    return sorted(
        payments,
        key=lambda p: (p.urgency.rank, p.due_date is None, p.due_date or date.min),
    )


def build_vendor_totals(categories: Iterable[Category]) -> VendorTotals:
    """Estimated, actual and paid totals across every vendor"""
    estimated = 0.0
    actual = 0.0
    paid = 0.0
    for category in categories:
        for line_item in category.line_items:
            estimated += line_item.estimated_cost
            actual += line_item.actual_cost
            paid += line_item.amount_paid

    return VendorTotals(estimated=round2(estimated), actual=round2(actual), paid=round2(paid))
