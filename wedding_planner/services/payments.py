"""Vendor payment plans from named split templates"""

from datetime import date
from typing import List

from wedding_planner.config import settings
from wedding_planner.domain.exceptions import UnknownPaymentTemplateError
from wedding_planner.domain.models import PlannedPayment
from wedding_planner.domain.payment_plans import generate_payment_plan, get_payment_template
from wedding_planner.infrastructure.observability.logging import log_payment_plan_generated
from wedding_planner.infrastructure.observability.metrics import payment_plan_counter


def plan_vendor_payments(
    actual_cost: float,
    template_name: str,
    wedding_date: date | str | None = None,
    today: date | None = None,
) -> List[PlannedPayment]:
    """
    Generate the payments for a vendor from a named template.

    Raises:
        UnknownPaymentTemplateError: If no template has that name
    """
    template = get_payment_template(template_name)
    if template is None:
        raise UnknownPaymentTemplateError(f"Unknown payment template: {template_name!r}")

    payments = generate_payment_plan(
        actual_cost,
        template,
        wedding_date=wedding_date,
        today=today,
        min_lead_days=settings.payment_min_lead_days,
    )

    payment_plan_counter.labels(template=template.name).inc()
    log_payment_plan_generated(template.name, actual_cost, len(payments))
    return payments
