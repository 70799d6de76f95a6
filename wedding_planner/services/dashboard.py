"""Client dashboard - every chart and table derived from a client's budget"""

import time
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping

from wedding_planner.config import settings
from wedding_planner.domain.aggregation import (
    build_cash_flow_data,
    build_category_allocation_data,
    build_paid_vs_remaining_data,
    build_payment_schedule_data,
    build_vendor_totals,
)
from wedding_planner.domain.milestones import build_milestone_alerts
from wedding_planner.domain.models import (
    BudgetStatus,
    CashFlowPoint,
    Category,
    CategoryAllocationPoint,
    FinancialPosition,
    Milestone,
    MilestoneAlert,
    ScheduledPayment,
    Urgency,
    VendorTotals,
)
from wedding_planner.domain.numeric import round2
from wedding_planner.domain.urgency import get_budget_status
from wedding_planner.infrastructure.observability.logging import log_dashboard_built
from wedding_planner.infrastructure.observability.metrics import dashboard_duration_histogram, record_payment_schedule
from wedding_planner.infrastructure.records.mappers import parse_categories, parse_client, parse_milestones


@dataclass
class ClientDashboard:
    cash_flow: List[CashFlowPoint]
    category_allocations: List[CategoryAllocationPoint]
    position: FinancialPosition
    payment_schedule: List[ScheduledPayment]
    vendor_totals: VendorTotals
    total_spent: float
    budget_status: BudgetStatus
    milestone_alerts: List[MilestoneAlert] = field(default_factory=list)


def build_client_dashboard(
    categories: Iterable[Category],
    total_budget: float,
    created_at: date | datetime | str,
    today: date | None = None,
    wedding_date: date | str | None = None,
    milestones: Iterable[Milestone] = (),
) -> ClientDashboard:
    """
    Aggregate a client's categories into dashboard data.

    The cash-flow series runs from the client's creation month through the
    wedding month (or the latest payment / current month, whichever is later).
    "Today" is read once and shared by every classification in the build.
    """
    start_time = time.time()
    if today is None:
        today = date.today()
    categories = list(categories)

    with dashboard_duration_histogram.time():
        schedule = build_payment_schedule_data(categories, today, settings.urgency_window_days)
        total_spent = round2(sum(c.actual_spend for c in categories))

        dashboard = ClientDashboard(
            cash_flow=build_cash_flow_data(categories, created_at, today=today, through=wedding_date),
            category_allocations=build_category_allocation_data(categories),
            position=build_paid_vs_remaining_data(categories, total_budget),
            payment_schedule=schedule,
            vendor_totals=build_vendor_totals(categories),
            total_spent=total_spent,
            budget_status=get_budget_status(total_budget, total_spent),
            milestone_alerts=build_milestone_alerts(milestones, today, settings.urgency_window_days),
        )

    record_payment_schedule(schedule)
    duration_ms = (time.time() - start_time) * 1000
    log_dashboard_built(
        category_count=len(categories),
        scheduled_payment_count=len(schedule),
        overdue_count=sum(1 for p in schedule if p.urgency == Urgency.OVERDUE),
        duration_ms=duration_ms,
    )
    return dashboard


def load_client_dashboard(
    client_row: Mapping[str, Any],
    category_rows: Iterable[Mapping[str, Any]],
    milestone_rows: Iterable[Mapping[str, Any]] = (),
    today: date | None = None,
) -> ClientDashboard:
    """
    Build a dashboard straight from persistence rows.

    Raises:
        InvalidRecordError: If any row does not match the expected shape
    """
    client = parse_client(client_row)
    return build_client_dashboard(
        parse_categories(category_rows),
        client.total_budget,
        client.created_at,
        today=today,
        wedding_date=client.wedding_date,
        milestones=parse_milestones(milestone_rows),
    )
