"""Default planning milestones per wedding level"""

from datetime import date
from typing import Iterable, List, Tuple

from wedding_planner.domain.models import (
    DefaultMilestone,
    Milestone,
    MilestoneAlert,
    MilestoneStatus,
    MilestoneTemplateItem,
    ScheduledMilestone,
    WeddingLevelId,
)
from wedding_planner.domain.scheduling import calculate_target_date
from wedding_planner.domain.urgency import classify_milestone_urgency

DIY = WeddingLevelId.DIY
LOVELY = WeddingLevelId.LOVELY
LUXURY = WeddingLevelId.LUXURY
SUPER_LUXURY = WeddingLevelId.SUPER_LUXURY
ULTRA_LUXURY = WeddingLevelId.ULTRA_LUXURY

# Catalog order is display order. A level includes every entry whose
# min_level ranks at or below it, so higher levels only ever add tasks.
DEFAULT_MILESTONES: Tuple[DefaultMilestone, ...] = (
    # 12 months
    DefaultMilestone("Set overall budget", "Determine total wedding budget and priorities", 12, None, DIY),
    DefaultMilestone("Book venue", "Research and secure wedding venue", 12, "Venue", DIY),
    DefaultMilestone(
        "Book destination venue scout",
        "Hire a destination specialist to evaluate venue options",
        12,
        "Venue",
        ULTRA_LUXURY,
    ),
    # 10 months
    DefaultMilestone("Book photographer", "Research and book wedding photographer", 10, "Photography", DIY),
    DefaultMilestone("Book planner/coordinator", "Hire a wedding planner or day-of coordinator", 10, "Planner Fee", DIY),
    DefaultMilestone("Book lighting designer", "Hire a lighting designer for the venue", 10, "Rentals", LOVELY),
    DefaultMilestone(
        "Book calligrapher",
        "Commission calligrapher for invitations and signage",
        10,
        "Misc",
        SUPER_LUXURY,
    ),
    # 9 months
    DefaultMilestone("Book caterer", "Select and book catering service", 9, "Catering", DIY),
    # 8 months
    DefaultMilestone("Book entertainment", "Book DJ, band, or other entertainment", 8, "Entertainment", DIY),
    DefaultMilestone("Book bar service", "Arrange bar and beverage service", 8, "Bar", DIY),
    DefaultMilestone("Book videographer", "Hire a wedding videographer", 8, "Photography", LUXURY),
    DefaultMilestone(
        "Book event designer",
        "Hire an event designer for overall aesthetic direction",
        8,
        "Planner Fee",
        SUPER_LUXURY,
    ),
    # 6 months
    DefaultMilestone("Book florist", "Select florist and plan floral arrangements", 6, "Floral", DIY),
    DefaultMilestone("Order rentals", "Book tables, chairs, linens, and other rentals", 6, "Rentals", DIY),
    DefaultMilestone(
        "Commission custom decor",
        "Order custom decor, signage, and installations",
        6,
        "Floral",
        LUXURY,
    ),
    DefaultMilestone(
        "Arrange guest travel logistics",
        "Coordinate travel and accommodation for out-of-town guests",
        6,
        "Misc",
        ULTRA_LUXURY,
    ),
    # 4 months
    DefaultMilestone("Send invitations", "Mail out wedding invitations", 4, None, DIY),
    # 3 months
    DefaultMilestone("Final venue walkthrough", "Do a detailed walkthrough of the venue with vendors", 3, "Venue", DIY),
    # 2 months
    DefaultMilestone(
        "Confirm all vendor details",
        "Confirm timelines, deliverables, and logistics with every vendor",
        2,
        None,
        DIY,
    ),
    # 1 month
    DefaultMilestone("Final guest count to caterer", "Submit final guest count and meal selections", 1, "Catering", DIY),
    DefaultMilestone("Final payments due", "Process remaining vendor payments", 1, None, DIY),
    # 2 weeks
    DefaultMilestone("Wedding rehearsal", "Run through ceremony logistics with wedding party", 0.5, None, DIY),
)


def get_default_milestones_for_level(level_id: str | WeddingLevelId | None) -> List[MilestoneTemplateItem]:
    """
    Return the catalog milestones included at a wedding level.

    Catalog order is preserved and sort_order is the position in the returned
    list, not in the catalog. Unknown level ids are treated as the lowest level
    and get only the core milestones.
    """
    level = WeddingLevelId.parse(level_id) or WeddingLevelId.DIY
    included = [m for m in DEFAULT_MILESTONES if m.min_level.rank <= level.rank]

    return [
        MilestoneTemplateItem(
            title=m.title,
            description=m.description,
            months_before=m.months_before,
            category_name=m.category_name,
            min_level=m.min_level,
            sort_order=index,
        )
        for index, m in enumerate(included)
    ]


def schedule_milestones(level_id: str | WeddingLevelId | None, wedding_date: date | str) -> List[ScheduledMilestone]:
    """Attach concrete target dates, counted back from the wedding, to a level's milestones"""
    return [
        ScheduledMilestone(
            title=m.title,
            description=m.description,
            months_before=m.months_before,
            category_name=m.category_name,
            min_level=m.min_level,
            sort_order=m.sort_order,
            target_date=calculate_target_date(wedding_date, m.months_before),
        )
        for m in get_default_milestones_for_level(level_id)
    ]


def build_milestone_alerts(
    milestones: Iterable[Milestone],
    today: date | None = None,
    window_days: int = 7,
) -> List[MilestoneAlert]:
    """
    Classify open milestones by urgency for the dashboard.

    Completed milestones are skipped. Alerts are ordered overdue, this week,
    upcoming, then by target date.
    """
    if today is None:
        today = date.today()

    alerts = [
        MilestoneAlert(
            milestone_id=m.milestone_id,
            title=m.title,
            target_date=m.target_date,
            urgency=classify_milestone_urgency(m.target_date, today, window_days),
        )
        for m in milestones
        if m.status != MilestoneStatus.COMPLETED
    ]
    return sorted(alerts, key=lambda a: (a.urgency.rank, a.target_date))
