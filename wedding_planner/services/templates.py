"""Apply a wedding-level template: category allocations plus a milestone timeline"""

from dataclasses import dataclass
from datetime import date
from typing import List

from wedding_planner.config import settings
from wedding_planner.domain.allocations import allocate_budget
from wedding_planner.domain.milestones import schedule_milestones
from wedding_planner.domain.models import AllocationPlan, ScheduledMilestone, WeddingLevelId
from wedding_planner.infrastructure.observability.logging import log_data_quality_warnings, log_template_applied
from wedding_planner.infrastructure.observability.metrics import record_allocation_plan


@dataclass
class WeddingTemplate:
    """Everything the template selector persists as new categories and milestones"""

    allocation_plan: AllocationPlan
    milestones: List[ScheduledMilestone]


def apply_wedding_template(
    total_budget: float,
    wedding_date: date | str,
    level_id: str | WeddingLevelId | None = None,
) -> WeddingTemplate:
    """
    Build the allocations and scheduled milestones for a client.

    Flow:
    1. Resolve the level (inferred from the budget when level_id is None)
    2. Allocate the budget across the default categories
    3. Schedule the level's milestones back from the wedding date
    4. Record metrics and log any data-quality warnings

    An unknown level id never fails: allocations come back as zeros, the
    milestone list holds only the core tasks, and the fallback is logged.
    """
    plan = allocate_budget(level_id, total_budget, settings.allocation_tolerance_per_category)
    milestones = schedule_milestones(plan.level.id if plan.level else None, wedding_date)

    record_allocation_plan(plan)
    log_data_quality_warnings(
        plan.warnings,
        level_id=plan.requested_level_id,
        total_budget=total_budget,
    )
    log_template_applied(plan.requested_level_id, total_budget, len(milestones))

    return WeddingTemplate(allocation_plan=plan, milestones=milestones)
