"""Gantt timeline for a client's milestones"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List

from wedding_planner.config import settings
from wedding_planner.domain.milestones import build_milestone_alerts
from wedding_planner.domain.models import Milestone, MilestoneStatus, MonthMarker, TimelineWindow, Urgency
from wedding_planner.domain.scheduling import get_gantt_position, get_month_markers, get_timeline_bounds


@dataclass
class TimelineBar:
    milestone_id: str
    title: str
    target_date: date
    position: float  # Percent across the window, 0-100
    status: MilestoneStatus
    urgency: Urgency | None = None  # None once completed


@dataclass
class MilestoneTimeline:
    window: TimelineWindow
    markers: List[MonthMarker]
    wedding_position: float
    today_position: float
    bars: List[TimelineBar] = field(default_factory=list)


def build_milestone_timeline(
    milestones: Iterable[Milestone],
    wedding_date: date | str,
    today: date | None = None,
) -> MilestoneTimeline:
    """
    Lay milestones out on a padded Gantt window ending after the wedding.

    Bars keep the input order. Completed milestones carry no urgency.
    """
    if today is None:
        today = date.today()
    milestones = list(milestones)

    window = get_timeline_bounds(
        [m.target_date for m in milestones],
        wedding_date,
        today=today,
        padding_months=settings.timeline_padding_months,
    )
    urgencies = {
        alert.milestone_id: alert.urgency
        for alert in build_milestone_alerts(milestones, today, settings.urgency_window_days)
    }

    bars = [
        TimelineBar(
            milestone_id=m.milestone_id,
            title=m.title,
            target_date=m.target_date,
            position=get_gantt_position(m.target_date, window.start, window.end),
            status=m.status,
            urgency=urgencies.get(m.milestone_id),
        )
        for m in milestones
    ]

    return MilestoneTimeline(
        window=window,
        markers=get_month_markers(window.start, window.end),
        wedding_position=get_gantt_position(wedding_date, window.start, window.end),
        today_position=get_gantt_position(today, window.start, window.end),
        bars=bars,
    )
