"""Unit tests for dashboard aggregation"""

from datetime import date
from wedding_planner.domain.aggregation import (
    build_cash_flow_data,
    build_category_allocation_data,
    build_paid_vs_remaining_data,
    build_payment_schedule_data,
    build_vendor_totals,
)
from wedding_planner.domain.models import PaymentStatus, Urgency


def test_cash_flow_fills_every_month(sample_categories, today):
    """Test months without payments still appear in the series"""
    points = build_cash_flow_data(sample_categories, date(2025, 1, 10), today=today)

    assert [p.month for p in points] == [
        "Jan 2025", "Feb 2025", "Mar 2025", "Apr 2025", "May 2025",
        "Jun 2025", "Jul 2025", "Aug 2025", "Sep 2025",
    ]
    assert [p.month_start.day for p in points] == [1] * 9


def test_cash_flow_buckets_paid_and_upcoming(sample_categories, today):
    """Test paid and pending payments land in separate monthly totals"""
    points = {p.month: p for p in build_cash_flow_data(sample_categories, date(2025, 1, 10), today=today)}

    # Deposit was due in March but paid in February
    assert points["Feb 2025"].paid == 6_000
    assert points["Mar 2025"].paid == 0
    assert points["Jun 2025"].upcoming == 5_000
    assert points["Sep 2025"].upcoming == 6_000
    assert points["Apr 2025"].paid == points["Apr 2025"].upcoming == 0


def test_cash_flow_omits_undated_payments(sample_categories, today):
    """Test payments with no date are left out of the chart"""
    points = build_cash_flow_data(sample_categories, date(2025, 1, 10), today=today)
    assert sum(p.upcoming for p in points) == 11_000


def test_cash_flow_labels(sample_categories, today):
    """Test year suffix on the first point and on each January"""
    points = build_cash_flow_data(sample_categories, date(2025, 1, 10), today=today, through=date(2026, 2, 14))

    assert points[0].label == "Jan '25"
    assert points[1].label == "Feb"
    assert points[-2].label == "Jan '26"
    assert points[-1].month == "Feb 2026"


def test_cash_flow_starts_at_earliest_payment(sample_categories, today):
    """Test window reaches back to payments before the anchor date"""
    points = build_cash_flow_data(sample_categories, "2025-05-01", today=today)

    assert points[0].month == "Feb 2025"
    assert points[0].label == "Feb '25"


def test_cash_flow_paid_without_paid_date_uses_due_date(make_category, make_line_item, make_payment, today):
    """Test paid payment with no paid date is placed by its due date"""
    categories = [
        make_category(
            line_items=[
                make_line_item(
                    payments=[make_payment(status=PaymentStatus.PAID, due_date=date(2025, 4, 3))],
                )
            ]
        )
    ]

    points = {p.month: p for p in build_cash_flow_data(categories, date(2025, 4, 1), today=today)}

    assert points["Apr 2025"].paid == 1_000


def test_cash_flow_empty_categories_spans_anchor_to_today(today):
    """Test zero-filled months from anchor to today with no payments"""
    points = build_cash_flow_data([], date(2025, 4, 10), today=today)

    assert [p.month for p in points] == ["Apr 2025", "May 2025", "Jun 2025"]
    assert all(p.paid == 0 and p.upcoming == 0 for p in points)


def test_cash_flow_rounds_to_cents(make_category, make_line_item, make_payment, today):
    """Test monthly totals are free of float artifacts"""
    categories = [
        make_category(
            line_items=[
                make_line_item(
                    payments=[
                        make_payment(payment_id="a", amount=0.1, due_date=date(2025, 6, 1)),
                        make_payment(payment_id="b", amount=0.2, due_date=date(2025, 6, 2)),
                    ]
                )
            ]
        )
    ]

    points = build_cash_flow_data(categories, date(2025, 6, 1), today=today)

    assert points[0].upcoming == 0.3


def test_category_allocation_excludes_zero_targets(sample_categories):
    """Test only categories with a positive target become slices"""
    slices = build_category_allocation_data(sample_categories)

    assert [s.name for s in slices] == ["Venue", "Catering"]
    assert slices[0].value == 15_000
    assert slices[0].spent == 12_000
    assert slices[1].spent == 8_000


def test_paid_vs_remaining(sample_categories):
    """Test committed, paid, pending and uncommitted split"""
    position = build_paid_vs_remaining_data(sample_categories, 50_000)

    assert position.total_committed == 20_000
    assert position.total_paid == 6_000
    assert position.total_pending == 14_000
    assert position.uncommitted == 30_000
    assert position.over_budget == 0


def test_paid_vs_remaining_no_categories():
    """Test empty budget is entirely uncommitted"""
    position = build_paid_vs_remaining_data([], 50_000)

    assert position.total_committed == 0
    assert position.total_paid == 0
    assert position.total_pending == 0
    assert position.uncommitted == 50_000


def test_paid_vs_remaining_over_budget_floors_uncommitted(make_category, make_line_item):
    """Test overspend floors uncommitted at 0 and stays recoverable"""
    categories = [make_category(line_items=[make_line_item(actual_cost=60_000)])]

    position = build_paid_vs_remaining_data(categories, 50_000)

    assert position.uncommitted == 0
    assert position.total_committed == 60_000
    assert position.over_budget == 10_000


def test_paid_vs_remaining_over_paid_floors_pending(make_category, make_line_item):
    """Legacy paid_to_date counts when a line item has no itemized payments"""
    categories = [make_category(line_items=[make_line_item(actual_cost=5_000, paid_to_date=7_000)])]

    position = build_paid_vs_remaining_data(categories, 50_000)

    assert position.total_paid == 7_000
    assert position.total_pending == 0
    assert position.over_paid == 2_000


def test_paid_to_date_ignored_when_payments_exist(make_category, make_line_item, make_payment):
    """Test itemized payments win over the legacy paid total"""
    line_item = make_line_item(
        paid_to_date=4_000,
        payments=[make_payment(status=PaymentStatus.PAID, amount=1_500, paid_date=date(2025, 5, 1))],
    )

    position = build_paid_vs_remaining_data([make_category(line_items=[line_item])], 50_000)

    assert position.total_paid == 1_500


def test_payment_schedule_order_and_exclusion(sample_categories, today):
    """Test paid payments dropped, rest ordered by urgency"""
    schedule = build_payment_schedule_data(sample_categories, today)

    assert [p.payment_id for p in schedule] == ["catering-1", "catering-2", "venue-final", "catering-3"]
    assert [p.urgency for p in schedule] == [
        Urgency.OVERDUE,
        Urgency.THIS_WEEK,
        Urgency.UPCOMING,
        Urgency.NO_DATE,
    ]


def test_payment_schedule_carries_vendor_context(sample_categories, today):
    """Test scheduled payment keeps vendor and category names"""
    final = next(p for p in build_payment_schedule_data(sample_categories, today) if p.payment_id == "venue-final")

    assert final.vendor_name == "Grand Hall"
    assert final.category_name == "Venue"
    assert final.label == "Final Payment"
    assert final.amount == 6_000
    assert final.status == PaymentStatus.PENDING


def test_payment_schedule_ties_sorted_by_due_date(make_category, make_line_item, make_payment, today):
    """Test same urgency ordered by due date ascending"""
    categories = [
        make_category(
            line_items=[
                make_line_item(
                    payments=[
                        make_payment(payment_id="later", due_date=date(2025, 10, 1)),
                        make_payment(payment_id="sooner", due_date=date(2025, 8, 1)),
                    ]
                )
            ]
        )
    ]

    assert [p.payment_id for p in build_payment_schedule_data(categories, today)] == ["sooner", "later"]


def test_payment_schedule_ties_keep_input_order(make_category, make_line_item, make_payment, today):
    """Test equal sort keys keep their input order, dated before undated"""
    categories = [
        make_category(
            line_items=[
                make_line_item(
                    payments=[
                        make_payment(payment_id="a", due_date=None),
                        make_payment(payment_id="b", due_date=date(2025, 8, 1)),
                        make_payment(payment_id="c", due_date=None),
                        make_payment(payment_id="d", due_date=date(2025, 8, 1)),
                        make_payment(payment_id="e", due_date=None),
                    ]
                )
            ]
        )
    ]

    schedule = build_payment_schedule_data(categories, today)

    assert [p.payment_id for p in schedule] == ["b", "d", "a", "c", "e"]


def test_payment_schedule_empty(today):
    """Test no categories gives an empty schedule"""
    assert build_payment_schedule_data([], today) == []


def test_vendor_totals(sample_categories):
    """Test estimated, actual and paid totals across vendors"""
    totals = build_vendor_totals(sample_categories)

    assert totals.estimated == 10_000
    assert totals.actual == 20_000
    assert totals.paid == 6_000
