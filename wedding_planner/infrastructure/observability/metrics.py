"""Prometheus metrics for template usage, data-quality signals and payment urgency"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from wedding_planner.domain.models import AllocationPlan, ScheduledPayment

# Template metrics
template_applied_counter = Counter(
    "wedding_template_applied_total",
    "Wedding templates applied",
    ["level"],  # diy | lovely | luxury | super_luxury | ultra_luxury | unknown
)

# Data-quality metrics
unknown_level_counter = Counter(
    "wedding_level_fallback_total",
    "Allocations that fell back to zero because the level id was unknown",
)

allocation_drift_counter = Counter(
    "allocation_drift_exceeded_total",
    "Allocations whose rounding drift exceeded tolerance",
)

# Payment metrics
scheduled_payment_counter = Counter(
    "scheduled_payments_total",
    "Outstanding payments seen while building schedules",
    ["urgency"],  # overdue | this_week | upcoming | no_date
)

payment_plan_counter = Counter(
    "payment_plans_generated_total",
    "Vendor payment plans generated from templates",
    ["template"],
)

# Computation latency
dashboard_duration_histogram = Histogram(
    "dashboard_build_duration_seconds",
    "Time spent aggregating a client dashboard",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_allocation_plan(plan: AllocationPlan) -> None:
    """Record template usage and data-quality signals for an allocation plan"""
    level = plan.level.id.value if plan.level is not None else "unknown"
    template_applied_counter.labels(level=level).inc()

    if plan.unknown_level:
        unknown_level_counter.inc()
    if plan.check is not None and not plan.check.within_tolerance:
        allocation_drift_counter.inc()


def record_payment_schedule(schedule: Iterable[ScheduledPayment]) -> None:
    """Count outstanding payments by urgency"""
    for payment in schedule:
        scheduled_payment_counter.labels(urgency=payment.urgency.value).inc()
